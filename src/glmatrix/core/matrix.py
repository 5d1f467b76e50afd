"""The matrix: every API version of a features document and the queries over them."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from glmatrix.constants import GLES_NAME
from glmatrix.core.elements import child_path, require_attribute, require_child
from glmatrix.core.extension import Extension
from glmatrix.core.hints import Hints
from glmatrix.core.version import ApiVersion

logger = logging.getLogger(__name__)


class Matrix:
    """Ordered API versions (document order) sharing one Hints context.

    Load with :meth:`load_document`, then call :meth:`resolve_dependencies`
    once. After that the matrix is only read, so it can be shared between
    concurrent readers.
    """

    def __init__(self, hints: Hints | None = None) -> None:
        self._versions: list[ApiVersion] = []
        self._hints = hints if hints is not None else Hints()

    @property
    def hints(self) -> Hints:
        return self._hints

    @property
    def versions(self) -> list[ApiVersion]:
        return list(self._versions)

    def add_version(self, version: ApiVersion) -> None:
        """Append a version. No duplicate check: callers must not add one twice."""
        self._versions.append(version)

    def iter_extensions(self) -> Iterator[Extension]:
        for version in self._versions:
            yield from version.iter_extensions()

    def find_extension_by_substring(self, substr: str) -> Extension | None:
        """First extension whose name contains ``substr`` (case-sensitive), or None."""
        for version in self._versions:
            ext = version.find_extension_by_substring(substr)
            if ext is not None:
                return ext
        return None

    def find_extension_by_name(self, name: str) -> Extension | None:
        for ext in self.iter_extensions():
            if ext.name == name:
                return ext
        return None

    def drivers_supporting_gles_version(self, version: str) -> dict[str, bool] | None:
        """
        Driver support map of the given OpenGL ES version.

        Returns None if the matrix has no such version; an empty dict means the
        version exists but lists no drivers.
        """
        for api_version in self._versions:
            if api_version.name == GLES_NAME and api_version.version == version:
                return dict(api_version.supported_drivers)
        return None

    def find_version_by_name(self, name: str, version: str) -> ApiVersion | None:
        for api_version in self._versions:
            if api_version.name == name and api_version.version == version:
                return api_version
        return None

    def resolve_dependencies(self) -> None:
        """Bind via references across all versions. Safe to call more than once.

        Cycles are only known once every version is bound, so they are
        reported in a second pass.
        """
        for version in self._versions:
            version.resolve_extension_dependencies(self)
        cyclic = sum(version.warn_cyclic_extensions() for version in self._versions)
        if cyclic:
            logger.debug("%d extension(s) left unresolved by via cycles", cyclic)

    def load_document(self, root: ET.Element) -> None:
        """
        Load every ``apis/api/versions/version`` element of ``root``.

        Versions are appended in document order. Raises MatrixParseError on a
        missing element or attribute; in that case nothing is appended.
        """
        root_path = root.tag
        apis_path = child_path(root_path, "apis")
        apis = require_child(root, "apis", root_path)

        loaded: list[ApiVersion] = []
        for api_index, api in enumerate(apis.findall("api"), start=1):
            api_path = child_path(apis_path, "api", api_index)
            loaded.extend(self._load_api(api, api_path))

        self._versions.extend(loaded)
        logger.debug("Loaded %d version(s) from <%s>", len(loaded), root.tag)

    def _load_api(self, api: ET.Element, path: str) -> list[ApiVersion]:
        versions_path = child_path(path, "versions")
        versions = require_child(api, "versions", path)

        loaded: list[ApiVersion] = []
        for index, elem in enumerate(versions.findall("version"), start=1):
            version_path = child_path(versions_path, "version", index)
            name = require_attribute(elem, "name", version_path)
            version = require_attribute(elem, "version", version_path)

            shader_path = child_path(version_path, "shader-version")
            shader = require_child(elem, "shader-version", version_path)
            shader_name = require_attribute(shader, "name", shader_path)
            shader_version = require_attribute(shader, "version", shader_path)

            api_version = ApiVersion(name, version, shader_name, shader_version, self._hints)
            api_version.parse_extensions(elem, version_path)
            loaded.append(api_version)
        return loaded

    def to_dict(self) -> dict:
        return {
            "hints": self._hints.to_dict(),
            "versions": [v.to_dict() for v in self._versions],
        }
