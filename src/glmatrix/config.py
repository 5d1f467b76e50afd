"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from pathlib import Path

FEATURES_XML_ENV = "GLMATRIX_FEATURES_XML"


def default_features_path() -> Path | None:
    """Path of the features document named by GLMATRIX_FEATURES_XML, if set."""
    value = os.environ.get(FEATURES_XML_ENV, "").strip()
    if not value:
        return None
    return Path(value).expanduser()
