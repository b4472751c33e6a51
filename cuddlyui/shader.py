"""Locating GLSL shader sources and naming GL enumerants."""

from __future__ import annotations

import os
import re
from enum import IntEnum
from pathlib import Path
from typing import Optional, Union

DEFAULT_SHADER_PATH = "/usr/local/share/cuddly-gl/shaders"
SHADER_PATH_ENV = "CUDDLY_SHADER_PATH"


class ShaderType(IntEnum):
    """The shader stages the toolkit loads."""

    VERTEX = 0x8B31
    GEOMETRY = 0x8DD9
    FRAGMENT = 0x8B30


class GLEnum(IntEnum):
    """GL error codes and shader types that have printable names."""

    NO_ERROR = 0x0000
    INVALID_ENUM = 0x0500
    INVALID_VALUE = 0x0501
    INVALID_OPERATION = 0x0502
    STACK_OVERFLOW = 0x0503
    STACK_UNDERFLOW = 0x0504
    OUT_OF_MEMORY = 0x0505
    TABLE_TOO_LARGE = 0x8031
    VERTEX_SHADER = 0x8B31
    GEOMETRY_SHADER = 0x8DD9
    FRAGMENT_SHADER = 0x8B30


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def glenum_to_string(value: int) -> str:
    """The GL name of a value, or an empty string if it has none here."""
    try:
        return "GL_" + GLEnum(value).name
    except ValueError:
        return ""


def shader_string(kind: int) -> str:
    """The file-name word for a shader stage, or an empty string."""
    try:
        return ShaderType(kind).name.lower()
    except ValueError:
        return ""


def shader_version(major: int, minor: int) -> str:
    """Which shader family suits a GL version: "2", "3" or "4"."""
    if major < 3:
        return "2"
    if major == 3 and minor < 3:
        return "3"
    return "4"


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    return int(match.group(1))


def parse_opengl_version(text: str) -> tuple[int, int]:
    """Read (major, minor) from a GL version string such as "4.6.0 Vendor".

    A string without a dot gives (0, 0).
    """
    dot = text.find(".")
    if dot == -1:
        return (0, 0)
    major = _leading_int(text[:dot])
    rest = text[dot + 1:]
    end = next((i for i, ch in enumerate(rest) if not ch.isdigit()), len(rest))
    minor = _leading_int(rest[:end])
    return (major, minor)


def shader_path(
    kind: int, major: int, minor: int, base: Optional[str] = None
) -> str:
    """Full path of the shader file for a stage and GL version.

    Without a base, the directory comes from the environment variable
    CUDDLY_SHADER_PATH, or else the installed default.
    """
    if base is None:
        base = os.environ.get(SHADER_PATH_ENV, DEFAULT_SHADER_PATH)
    path = str(base)
    if path and not path.endswith("/"):
        path += "/"
    return f"{path}ui_{shader_string(kind)}.{shader_version(major, minor)}.glsl"


def load_shader_source(
    kind: int, major: int, minor: int, base: Optional[Union[str, Path]] = None
) -> str:
    """Read the source text of the shader file for a stage and GL version."""
    fname = shader_path(kind, major, minor, None if base is None else str(base))
    try:
        return Path(fname).read_bytes().decode("utf-8")
    except OSError as exc:
        raise OSError(f"could not open file {fname}") from exc