"""Command-line interface for glmatrix: list versions, show extensions, query driver support."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from glmatrix.config import FEATURES_XML_ENV, default_features_path
from glmatrix.core.errors import MatrixParseError
from glmatrix.core.extension import Extension
from glmatrix.core.matrix import Matrix
from glmatrix.core.parser import load_features_xml
from glmatrix.core.version import ApiVersion


def _status_label(ext: Extension) -> str:
    status = ext.effective_status()
    if status is None:
        return "cycle" if ext.is_cyclic() else "unknown"
    return status.value


def _print_extension_text(ext: Extension, prefix: str = "", marker: str = "") -> None:
    """Print an extension and its sub-extensions as an indented tree."""
    via = f" (via {ext.via_name})" if ext.via_name else ""
    note = f" - {ext.note}" if ext.note else ""
    print(f"{prefix}{marker}{ext.name} [{_status_label(ext)}]{via}{note}")
    child_prefix = prefix + ("    " if marker in ("", "└── ") else "│   ")
    if ext.hint:
        print(f"{child_prefix}hint: {ext.hint}")
    for i, sub in enumerate(ext.subextensions):
        is_last = i == len(ext.subextensions) - 1
        _print_extension_text(sub, child_prefix, "└── " if is_last else "├── ")


def _format_drivers(drivers: dict[str, bool]) -> str:
    if not drivers:
        return "none"
    return ", ".join(f"{name}{'' if ok else ' (no)'}" for name, ok in drivers.items())


def _version_title(version: ApiVersion) -> str:
    return f"{version.name} {version.version} ({version.shader_name} {version.shader_version})"


def _load(args: argparse.Namespace) -> Matrix | None:
    """Load the document named on the command line (or by the environment)."""
    path = Path(args.file) if args.file else default_features_path()
    if path is None:
        print(
            f"Error: no features document. Use -f FILE or set {FEATURES_XML_ENV}.",
            file=sys.stderr,
        )
        return None
    try:
        return load_features_xml(path)
    except MatrixParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.suggestion:
            print(f"  {e.suggestion}", file=sys.stderr)
        return None
    except OSError as e:
        print(f"Error reading {path}: {e}", file=sys.stderr)
        return None


def cmd_versions(args: argparse.Namespace) -> int:
    """List the API versions of the document."""
    matrix = _load(args)
    if matrix is None:
        return 2

    versions = matrix.versions
    if args.json:
        print(json.dumps([
            {
                "name": v.name,
                "version": v.version,
                "shader_name": v.shader_name,
                "shader_version": v.shader_version,
                "extensions": len(v.extensions),
            }
            for v in versions
        ], indent=2))
        return 0
    if not versions:
        print("No versions found.")
        return 0
    print(f"Found {len(versions)} version(s):\n")
    for v in versions:
        print(f"  {_version_title(v)}: {len(v.extensions)} extension(s)")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Show one version with its extensions."""
    matrix = _load(args)
    if matrix is None:
        return 2

    version = matrix.find_version_by_name(args.api, args.version)
    if version is None:
        print(f"Version not found: {args.api} {args.version}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(version.to_dict(), indent=2))
        return 0
    print(_version_title(version))
    print(f"  Drivers: {_format_drivers(version.supported_drivers)}\n")
    for ext in version.extensions:
        _print_extension_text(ext, "  ")
    return 0


def cmd_find(args: argparse.Namespace) -> int:
    """Find the first extension whose name contains a substring."""
    matrix = _load(args)
    if matrix is None:
        return 2

    ext = matrix.find_extension_by_substring(args.substring)
    if ext is None:
        print(f"No extension matching: {args.substring}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(ext.to_dict(), indent=2))
        return 0
    _print_extension_text(ext)
    drivers = ext.effective_supported_drivers()
    if drivers is not None:
        print(f"    drivers: {_format_drivers(drivers)}")
    return 0


def cmd_drivers(args: argparse.Namespace) -> int:
    """List the drivers supporting an OpenGL ES version."""
    matrix = _load(args)
    if matrix is None:
        return 2

    drivers = matrix.drivers_supporting_gles_version(args.version)
    if drivers is None:
        print(f"OpenGL ES version not found: {args.version}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(drivers, indent=2))
        return 0
    supported = [name for name, ok in drivers.items() if ok]
    if not supported:
        print(f"No driver supports OpenGL ES {args.version}.")
        return 0
    print(f"OpenGL ES {args.version} is supported by {len(supported)} driver(s):\n")
    for name in supported:
        print(f"  {name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the glmatrix CLI."""
    parser = argparse.ArgumentParser(
        prog="glmatrix",
        description="Query a graphics API feature matrix (versions, extensions, drivers).",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "-f",
        "--file",
        metavar="FILE",
        help=f"Features XML document (default: ${FEATURES_XML_ENV})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing and resolution details to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # glmatrix versions
    versions_parser = subparsers.add_parser(
        "versions",
        help="List API versions",
        description="List every API version of the document, in document order.",
    )
    versions_parser.add_argument("--json", action="store_true", help="Output as JSON")
    versions_parser.set_defaults(func=cmd_versions)

    # glmatrix show
    show_parser = subparsers.add_parser(
        "show",
        help="Show the extensions of one version",
        description="Show one API version, its drivers and its extensions.",
    )
    show_parser.add_argument("api", help='API name, e.g. "OpenGL" or "OpenGL ES"')
    show_parser.add_argument("version", help="Version string, e.g. 4.5")
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")
    show_parser.set_defaults(func=cmd_show)

    # glmatrix find
    find_parser = subparsers.add_parser(
        "find",
        help="Find an extension by substring",
        description="Show the first extension whose name contains SUBSTRING (case-sensitive).",
    )
    find_parser.add_argument("substring", help="Part of the extension name")
    find_parser.add_argument("--json", action="store_true", help="Output as JSON")
    find_parser.set_defaults(func=cmd_find)

    # glmatrix drivers
    drivers_parser = subparsers.add_parser(
        "drivers",
        help="List drivers supporting an OpenGL ES version",
        description="Show the driver support map of an OpenGL ES version.",
    )
    drivers_parser.add_argument("version", help="OpenGL ES version, e.g. 3.1")
    drivers_parser.add_argument("--json", action="store_true", help="Output as JSON")
    drivers_parser.set_defaults(func=cmd_drivers)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
