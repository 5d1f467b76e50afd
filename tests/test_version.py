"""Tests for glmatrix.core.version module."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from glmatrix.core.extension import Extension, Status
from glmatrix.core.hints import Hints
from glmatrix.core.matrix import Matrix
from glmatrix.core.version import ApiVersion


def _version(**kwargs) -> ApiVersion:
    return ApiVersion("OpenGL", "4.5", "GLSL", "4.50", **kwargs)


class TestApiVersion:
    """Tests for ApiVersion dataclass."""

    def test_basic_creation(self) -> None:
        v = _version()
        assert v.name == "OpenGL"
        assert v.version == "4.5"
        assert v.shader_name == "GLSL"
        assert v.shader_version == "4.50"
        assert v.extensions == []
        assert v.supported_drivers == {}
        assert len(v.hints) == 0

    def test_parse_extensions_document_order(self) -> None:
        elem = ET.fromstring(
            """<version name="OpenGL" version="4.5">
                <shader-version name="GLSL" version="4.50"/>
                <supported-drivers>
                    <driver name="radeonsi"/>
                    <driver name="softpipe" supported="false"/>
                </supported-drivers>
                <extensions>
                    <extension name="GL_ARB_clip_control" status="done"/>
                    <extension name="GL_ARB_cull_distance" status="in-progress"/>
                    <extension name="GL_ARB_ES3_1_compatibility"/>
                </extensions>
            </version>"""
        )
        v = _version()
        v.parse_extensions(elem)
        assert [e.name for e in v.extensions] == [
            "GL_ARB_clip_control",
            "GL_ARB_cull_distance",
            "GL_ARB_ES3_1_compatibility",
        ]
        assert v.supported_drivers == {"radeonsi": True, "softpipe": False}

    def test_parse_extensions_uses_shared_hints(self) -> None:
        elem = ET.fromstring(
            """<version name="OpenGL" version="4.5">
                <shader-version name="GLSL" version="4.50"/>
                <extensions><extension name="GL_ARB_foo" hint="h1"/></extensions>
            </version>"""
        )
        v = _version(hints=Hints({"h1": "Only with LLVM"}))
        v.parse_extensions(elem)
        assert v.extensions[0].hint == "Only with LLVM"

    def test_parse_extensions_empty(self) -> None:
        elem = ET.fromstring(
            '<version name="OpenGL" version="4.5"><shader-version name="GLSL" version="4.50"/></version>'
        )
        v = _version()
        v.parse_extensions(elem)
        assert v.extensions == []
        assert v.supported_drivers == {}

    def test_find_extension_by_substring(self) -> None:
        v = _version(
            extensions=[
                Extension(name="GL_ARB_foo"),
                Extension(name="GL_EXT_foobar"),
            ]
        )
        found = v.find_extension_by_substring("foo")
        assert found is not None
        assert found.name == "GL_ARB_foo"
        assert v.find_extension_by_substring("bar").name == "GL_EXT_foobar"
        assert v.find_extension_by_substring("zzz") is None

    def test_find_extension_by_substring_is_case_sensitive(self) -> None:
        v = _version(extensions=[Extension(name="GL_ARB_foo")])
        assert v.find_extension_by_substring("FOO") is None

    def test_find_extension_by_substring_searches_subextensions(self) -> None:
        v = _version(
            extensions=[
                Extension(name="GL_ARB_gpu_shader5", subextensions=[Extension(name="textureGather")]),
            ]
        )
        assert v.find_extension_by_substring("Gather").name == "textureGather"

    def test_resolve_same_version(self) -> None:
        x = Extension(name="X", status=Status.DONE)
        y = Extension(name="Y", via_name="X")
        v = _version(extensions=[x, y])
        matrix = Matrix()
        matrix.add_version(v)
        v.resolve_extension_dependencies(matrix)
        assert y.via is x
        assert y.effective_status() == "done"

    def test_resolve_dangling_keeps_own_status(self) -> None:
        y = Extension(name="Y", status=Status.IN_PROGRESS, via_name="Z")
        v = _version(extensions=[y])
        matrix = Matrix()
        matrix.add_version(v)
        v.resolve_extension_dependencies(matrix)
        assert y.via is None
        assert y.effective_status() is Status.IN_PROGRESS

    def test_resolve_subextension_via(self) -> None:
        target = Extension(name="GL_ARB_foo", status=Status.DONE)
        sub = Extension(name="sub", via_name="GL_ARB_foo")
        v = _version(extensions=[target, Extension(name="parent", subextensions=[sub])])
        matrix = Matrix()
        matrix.add_version(v)
        v.resolve_extension_dependencies(matrix)
        assert sub.effective_status() is Status.DONE

    def test_to_dict(self) -> None:
        v = _version(extensions=[Extension(name="X")], supported_drivers={"iris": True})
        d = v.to_dict()
        assert d["name"] == "OpenGL"
        assert d["shader_version"] == "4.50"
        assert d["supported_drivers"] == {"iris": True}
        assert [e["name"] for e in d["extensions"]] == ["X"]
