"""Errors raised while loading a features document."""

from __future__ import annotations


class MatrixParseError(Exception):
    """A required element or attribute is missing or malformed.

    ``path`` locates the offending element, e.g.
    ``mesa/apis/api[1]/versions/version[2]/shader-version``.
    """

    def __init__(self, path: str, message: str, suggestion: str | None = None):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
        self.suggestion = suggestion
