"""Element-level readers for the features document."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from glmatrix.core.errors import MatrixParseError
from glmatrix.core.extension import STATUS_ALIASES, Extension, parse_status
from glmatrix.core.hints import Hints

_TRUE_VALUES = ("true", "yes", "1")
_FALSE_VALUES = ("false", "no", "0")


def child_path(parent_path: str, tag: str, index: int | None = None) -> str:
    """Path of a child element; ``index`` is 1-based among same-tag siblings."""
    if index is None:
        return f"{parent_path}/{tag}"
    return f"{parent_path}/{tag}[{index}]"


def require_attribute(elem: ET.Element, attr: str, path: str) -> str:
    value = (elem.get(attr) or "").strip()
    if not value:
        raise MatrixParseError(path, f"missing required attribute '{attr}'")
    return value


def optional_attribute(elem: ET.Element, attr: str) -> str | None:
    value = elem.get(attr)
    if value is None:
        return None
    value = value.strip()
    return value or None


def require_child(elem: ET.Element, tag: str, path: str) -> ET.Element:
    child = elem.find(tag)
    if child is None:
        raise MatrixParseError(path, f"missing required element <{tag}>")
    return child


def parse_supported_drivers(elem: ET.Element | None, path: str) -> dict[str, bool]:
    """Read a ``<supported-drivers>`` block into a driver -> supported map."""
    drivers: dict[str, bool] = {}
    if elem is None:
        return drivers
    for i, driver in enumerate(elem.findall("driver"), start=1):
        driver_path = child_path(path, "driver", i)
        name = require_attribute(driver, "name", driver_path)
        raw = (driver.get("supported") or "true").strip().lower()
        if raw in _TRUE_VALUES:
            drivers[name] = True
        elif raw in _FALSE_VALUES:
            drivers[name] = False
        else:
            raise MatrixParseError(
                driver_path,
                f"invalid 'supported' value: {raw!r}",
                "Use one of: true, false, yes, no, 1, 0.",
            )
    return drivers


def parse_extension(elem: ET.Element, hints: Hints, path: str) -> Extension:
    """Build an Extension (and its sub-extensions) from an ``<extension>`` element.

    The via attribute is kept as a raw name; binding happens once the whole
    document is loaded.
    """
    name = require_attribute(elem, "name", path)

    status = None
    raw_status = optional_attribute(elem, "status")
    if raw_status is not None:
        status = parse_status(raw_status)
        if status is None:
            raise MatrixParseError(
                path,
                f"unknown status {raw_status!r} for extension {name}",
                "Use one of: " + ", ".join(sorted(STATUS_ALIASES)) + ".",
            )

    drivers_path = child_path(path, "supported-drivers")
    subextensions: list[Extension] = []
    container = elem.find("subextensions")
    if container is not None:
        sub_path = child_path(path, "subextensions")
        for i, sub in enumerate(container.findall("extension"), start=1):
            subextensions.append(parse_extension(sub, hints, child_path(sub_path, "extension", i)))

    return Extension(
        name=name,
        status=status,
        note=optional_attribute(elem, "note"),
        hint=hints.lookup(optional_attribute(elem, "hint")),
        via_name=optional_attribute(elem, "via"),
        supported_drivers=parse_supported_drivers(elem.find("supported-drivers"), drivers_path),
        subextensions=subextensions,
    )


def parse_hints(elem: ET.Element | None, path: str) -> Hints:
    """Read an optional ``<hints>`` block."""
    hints = Hints()
    if elem is None:
        return hints
    for i, hint in enumerate(elem.findall("hint"), start=1):
        key = require_attribute(hint, "id", child_path(path, "hint", i))
        hints.add(key, (hint.text or "").strip())
    return hints
