"""Public API: use glmatrix from Python or from other tools."""

from __future__ import annotations

from pathlib import Path

from glmatrix.config import default_features_path
from glmatrix.core.errors import MatrixParseError
from glmatrix.core.extension import Extension
from glmatrix.core.matrix import Matrix
from glmatrix.core.parser import load_features_xml
from glmatrix.core.version import ApiVersion


def load_matrix(path: Path | None = None) -> Matrix:
    """
    Load and resolve a features document.

    Args:
        path: Features XML file. Defaults to GLMATRIX_FEATURES_XML.

    Raises:
        MatrixParseError: If the document is malformed, or no path is given
            and none is configured.
    """
    if path is None:
        path = default_features_path()
    if path is None:
        raise MatrixParseError(
            "<config>",
            "no features document given",
            "Pass a path or set GLMATRIX_FEATURES_XML.",
        )
    return load_features_xml(Path(path))


def find_extension(matrix: Matrix, substr: str) -> Extension | None:
    """First extension (in document order) whose name contains ``substr``."""
    return matrix.find_extension_by_substring(substr)


def gles_drivers(matrix: Matrix, version: str) -> dict[str, bool] | None:
    """Driver support map for an OpenGL ES version, or None if the version is unknown."""
    return matrix.drivers_supporting_gles_version(version)


def get_version(matrix: Matrix, name: str, version: str) -> ApiVersion | None:
    return matrix.find_version_by_name(name, version)
