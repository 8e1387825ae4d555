"""Shader source handling: type detection by file extension, loading, type names."""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

# OpenGL enumerants used to name uniform and attribute types.
GL_INT = 0x1404
GL_UNSIGNED_INT = 0x1405
GL_FLOAT = 0x1406
GL_DOUBLE = 0x140A
GL_FLOAT_VEC2 = 0x8B50
GL_FLOAT_VEC3 = 0x8B51
GL_FLOAT_VEC4 = 0x8B52
GL_BOOL = 0x8B56
GL_FLOAT_MAT2 = 0x8B5A
GL_FLOAT_MAT3 = 0x8B5B
GL_FLOAT_MAT4 = 0x8B5C


class ShaderError(RuntimeError):
    """Raised when a shader cannot be identified, found, read or built."""


class ShaderType(IntEnum):
    """Shader stages, valued by their OpenGL enumerants."""

    VERTEX = 0x8B31
    FRAGMENT = 0x8B30
    GEOMETRY = 0x8DD9
    TESS_CONTROL = 0x8E88
    TESS_EVALUATION = 0x8E87
    COMPUTE = 0x91B9


_EXTENSIONS: dict[str, ShaderType] = {
    ".vs": ShaderType.VERTEX,
    ".vert": ShaderType.VERTEX,
    ".gs": ShaderType.GEOMETRY,
    ".geom": ShaderType.GEOMETRY,
    ".tcs": ShaderType.TESS_CONTROL,
    ".tes": ShaderType.TESS_EVALUATION,
    ".fs": ShaderType.FRAGMENT,
    ".frag": ShaderType.FRAGMENT,
    ".cs": ShaderType.COMPUTE,
}

_TYPE_NAMES: dict[int, str] = {
    GL_FLOAT: "float",
    GL_FLOAT_VEC2: "vec2",
    GL_FLOAT_VEC3: "vec3",
    GL_FLOAT_VEC4: "vec4",
    GL_DOUBLE: "double",
    GL_INT: "int",
    GL_UNSIGNED_INT: "unsigned int",
    GL_BOOL: "bool",
    GL_FLOAT_MAT2: "mat2",
    GL_FLOAT_MAT3: "mat3",
    GL_FLOAT_MAT4: "mat4",
}


def file_extension(name: PathLike) -> str:
    """Return everything from the last '.' in ``name`` onward, or '' if none."""
    text = os.fspath(name)
    loc = text.rfind(".")
    return text[loc:] if loc != -1 else ""


def shader_type_for(filename: PathLike) -> ShaderType:
    """Determine the shader stage from the file name's extension."""
    ext = file_extension(filename)
    try:
        return _EXTENSIONS[ext]
    except KeyError:
        raise ShaderError(f"Unrecognized extension: {ext}") from None


def read_shader_source(filename: PathLike) -> str:
    """Read and return the whole text of a shader file."""
    path = Path(filename)
    name = os.fspath(filename)
    if not path.exists():
        raise ShaderError(f"Shader: {name} not found.")
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise ShaderError(f"Unable to open: {name}") from exc


def uniform_type_name(gl_type: int) -> str:
    """GLSL name of a common OpenGL type enumerant, or '?' if unknown."""
    return _TYPE_NAMES.get(gl_type, "?")