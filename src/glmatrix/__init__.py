"""glmatrix: graphics API feature matrix (versions, extensions, driver support)."""

from importlib.metadata import version, PackageNotFoundError

from glmatrix.api import find_extension, get_version, gles_drivers, load_matrix
from glmatrix.core import (
    ApiVersion,
    Extension,
    Hints,
    Matrix,
    MatrixParseError,
    Status,
    load_features_string,
    load_features_xml,
)

__all__ = [
    "find_extension",
    "get_version",
    "gles_drivers",
    "load_matrix",
    "load_features_string",
    "load_features_xml",
    "ApiVersion",
    "Extension",
    "Hints",
    "Matrix",
    "MatrixParseError",
    "Status",
    "__version__",
]

try:
    __version__ = version("glmatrix")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed as package
