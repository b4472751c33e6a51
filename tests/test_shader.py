import pytest

from cuddlyui.shader import (
    GLEnum,
    ShaderType,
    glenum_to_string,
    load_shader_source,
    parse_opengl_version,
    shader_path,
    shader_string,
    shader_version,
)


@pytest.mark.parametrize(
    "major, minor, expected",
    [(2, 1, "2"), (1, 5, "2"), (3, 0, "3"), (3, 2, "3"), (3, 3, "4"), (4, 6, "4")],
)
def test_shader_version(major, minor, expected):
    assert shader_version(major, minor) == expected


def test_shader_string():
    assert shader_string(ShaderType.VERTEX) == "vertex"
    assert shader_string(ShaderType.GEOMETRY) == "geometry"
    assert shader_string(ShaderType.FRAGMENT) == "fragment"
    assert shader_string(1) == ""


def test_glenum_to_string():
    assert glenum_to_string(ShaderType.VERTEX) == "GL_VERTEX_SHADER"
    assert glenum_to_string(GLEnum.INVALID_OPERATION) == "GL_INVALID_OPERATION"
    assert glenum_to_string(GLEnum.NO_ERROR) == "GL_NO_ERROR"
    assert glenum_to_string(12345) == ""


def test_glenum_names_round_trip():
    for member in GLEnum:
        assert glenum_to_string(int(member)) == "GL_" + member.name


def test_parse_opengl_version():
    assert parse_opengl_version("4.6.0 NVIDIA 535") == (4, 6)
    assert parse_opengl_version("3.3") == (3, 3)
    assert parse_opengl_version("2.1 Mesa") == (2, 1)


def test_parse_opengl_version_without_dot():
    assert parse_opengl_version("unknown") == (0, 0)


@pytest.mark.parametrize("text", ["OpenGL ES 3.2", "4.x"])
def test_parse_opengl_version_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_opengl_version(text)


def test_shader_path_with_base():
    assert (
        shader_path(ShaderType.VERTEX, 4, 6, "/opt/shaders")
        == "/opt/shaders/ui_vertex.4.glsl"
    )
    assert (
        shader_path(ShaderType.FRAGMENT, 3, 0, "/opt/shaders/")
        == "/opt/shaders/ui_fragment.3.glsl"
    )


def test_shader_path_empty_base_gets_no_slash():
    assert shader_path(ShaderType.FRAGMENT, 2, 0, "") == "ui_fragment.2.glsl"


def test_shader_path_from_environment(monkeypatch):
    monkeypatch.setenv("CUDDLY_SHADER_PATH", "/from/env")
    assert shader_path(ShaderType.GEOMETRY, 3, 3) == "/from/env/ui_geometry.4.glsl"


def test_load_shader_source(tmp_path, monkeypatch):
    text = "void main() {}\n"
    (tmp_path / "ui_vertex.3.glsl").write_text(text)
    monkeypatch.setenv("CUDDLY_SHADER_PATH", str(tmp_path))
    assert load_shader_source(ShaderType.VERTEX, 3, 1) == text
    assert load_shader_source(ShaderType.VERTEX, 3, 1, tmp_path) == text


def test_load_missing_shader_raises(tmp_path):
    with pytest.raises(OSError, match="could not open file"):
        load_shader_source(ShaderType.FRAGMENT, 4, 0, tmp_path)