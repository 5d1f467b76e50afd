"""One version of an API family and the extensions attached to it."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from glmatrix.core.elements import child_path, parse_extension, parse_supported_drivers
from glmatrix.core.extension import Extension
from glmatrix.core.hints import Hints

if TYPE_CHECKING:
    from glmatrix.core.matrix import Matrix

logger = logging.getLogger(__name__)


@dataclass
class ApiVersion:
    """A version of an API family (e.g. OpenGL 4.5 with GLSL 4.50)."""

    name: str
    version: str
    shader_name: str
    shader_version: str
    hints: Hints = field(default_factory=Hints, repr=False, compare=False)
    extensions: list[Extension] = field(default_factory=list)
    supported_drivers: dict[str, bool] = field(default_factory=dict)

    def parse_extensions(self, elem: ET.Element, path: str = "version") -> None:
        """Read extensions and driver support from a ``<version>`` element."""
        self.supported_drivers = parse_supported_drivers(
            elem.find("supported-drivers"), child_path(path, "supported-drivers")
        )
        extensions: list[Extension] = []
        container = elem.find("extensions")
        if container is not None:
            ext_path = child_path(path, "extensions")
            for i, ext in enumerate(container.findall("extension"), start=1):
                extensions.append(
                    parse_extension(ext, self.hints, child_path(ext_path, "extension", i))
                )
        self.extensions = extensions
        logger.debug(
            "Parsed %s %s: %d extension(s), %d driver(s)",
            self.name,
            self.version,
            len(extensions),
            len(self.supported_drivers),
        )

    def iter_extensions(self) -> Iterator[Extension]:
        """Yield every extension, sub-extensions right after their parent."""
        for ext in self.extensions:
            yield from ext.iter_tree()

    def resolve_extension_dependencies(self, matrix: Matrix) -> None:
        """Bind unresolved via references against every version of ``matrix``.

        Dangling references are left unbound; the extension keeps its own status.
        """
        for ext in self.iter_extensions():
            if ext.via_name is None or ext.via is not None:
                continue
            target = matrix.find_extension_by_name(ext.via_name)
            if target is None:
                logger.info(
                    "%s %s: %s is implemented via unknown extension %s",
                    self.name,
                    self.version,
                    ext.name,
                    ext.via_name,
                )
                continue
            ext.bind_via(target)

    def warn_cyclic_extensions(self) -> int:
        """Log a warning for each bound extension whose via chain loops. Returns the count."""
        count = 0
        for ext in self.iter_extensions():
            if ext.via is not None and ext.is_cyclic():
                logger.warning(
                    "%s %s: via chain of %s loops back on itself; status left unresolved",
                    self.name,
                    self.version,
                    ext.name,
                )
                count += 1
        return count

    def find_extension_by_substring(self, substr: str) -> Extension | None:
        for ext in self.iter_extensions():
            if substr in ext.name:
                return ext
        return None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "version": self.version,
            "shader_name": self.shader_name,
            "shader_version": self.shader_version,
            "supported_drivers": dict(self.supported_drivers),
            "extensions": [e.to_dict() for e in self.extensions],
        }
