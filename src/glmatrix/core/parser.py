"""Load a features document (file or text) into a resolved Matrix."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from glmatrix.core.elements import child_path, parse_hints
from glmatrix.core.errors import MatrixParseError
from glmatrix.core.matrix import Matrix

logger = logging.getLogger(__name__)


def build_matrix(root: ET.Element) -> Matrix:
    """
    Build a resolved Matrix from the root element of a features document.

    The optional ``<hints>`` block is read first so every version sees the
    same Hints context; via references are bound once all versions are loaded.
    """
    hints = parse_hints(root.find("hints"), child_path(root.tag, "hints"))
    matrix = Matrix(hints)
    matrix.load_document(root)
    matrix.resolve_dependencies()
    return matrix


def load_features_string(text: str) -> Matrix:
    """Parse XML text and return a resolved Matrix. Raises MatrixParseError."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise MatrixParseError("<document>", f"malformed XML: {e}") from e
    return build_matrix(root)


def load_features_xml(path: Path) -> Matrix:
    """
    Parse a features XML file and return a resolved Matrix.

    Raises MatrixParseError for malformed XML or a missing element/attribute,
    and OSError if the file cannot be read.
    """
    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise MatrixParseError(str(path), f"malformed XML: {e}") from e
    logger.debug("Parsed %s", path)
    return build_matrix(tree.getroot())
