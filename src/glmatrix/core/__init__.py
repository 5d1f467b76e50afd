"""Core library: features document parsing, the version/extension model, queries."""

from glmatrix.core.errors import MatrixParseError
from glmatrix.core.extension import Extension, Status
from glmatrix.core.hints import Hints
from glmatrix.core.matrix import Matrix
from glmatrix.core.parser import build_matrix, load_features_string, load_features_xml
from glmatrix.core.version import ApiVersion

__all__ = [
    "MatrixParseError",
    "Extension",
    "Status",
    "Hints",
    "Matrix",
    "build_matrix",
    "load_features_string",
    "load_features_xml",
    "ApiVersion",
]
