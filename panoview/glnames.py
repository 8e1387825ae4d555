"""Readable names for OpenGL enumerants used by the viewer.

Covers debug-callback messages, error codes, texture units, texture pixel
formats and the shader file pairs used by each material.
"""

from __future__ import annotations

# Debug message sources.
GL_DEBUG_SOURCE_API = 0x8246
GL_DEBUG_SOURCE_WINDOW_SYSTEM = 0x8247
GL_DEBUG_SOURCE_SHADER_COMPILER = 0x8248
GL_DEBUG_SOURCE_THIRD_PARTY = 0x8249
GL_DEBUG_SOURCE_APPLICATION = 0x824A
GL_DEBUG_SOURCE_OTHER = 0x824B

# Debug message types.
GL_DEBUG_TYPE_ERROR = 0x824C
GL_DEBUG_TYPE_DEPRECATED_BEHAVIOR = 0x824D
GL_DEBUG_TYPE_UNDEFINED_BEHAVIOR = 0x824E
GL_DEBUG_TYPE_PORTABILITY = 0x824F
GL_DEBUG_TYPE_PERFORMANCE = 0x8250
GL_DEBUG_TYPE_OTHER = 0x8251
GL_DEBUG_TYPE_MARKER = 0x8268
GL_DEBUG_TYPE_PUSH_GROUP = 0x8269
GL_DEBUG_TYPE_POP_GROUP = 0x826A

# Debug message severities.
GL_DEBUG_SEVERITY_NOTIFICATION = 0x826B
GL_DEBUG_SEVERITY_HIGH = 0x9146
GL_DEBUG_SEVERITY_MEDIUM = 0x9147
GL_DEBUG_SEVERITY_LOW = 0x9148

# Error codes.
GL_NO_ERROR = 0
GL_INVALID_ENUM = 0x0500
GL_INVALID_VALUE = 0x0501
GL_INVALID_OPERATION = 0x0502
GL_OUT_OF_MEMORY = 0x0505
GL_INVALID_FRAMEBUFFER_OPERATION = 0x0506

# Texturing.
GL_TEXTURE0 = 0x84C0
GL_NEAREST = 0x2600
GL_LINEAR = 0x2601
GL_LINEAR_MIPMAP_LINEAR = 0x2703
GL_UNSIGNED_BYTE = 0x1401
GL_RED = 0x1903
GL_RGB = 0x1907
GL_RGBA = 0x1908
GL_RGBA8 = 0x8058
GL_R8 = 0x8229
GL_UNSIGNED_INT_8_8_8_8_REV = 0x8367

# Virtual key codes for camera movement.
VK_W = 0x57
VK_S = 0x53
VK_A = 0x41
VK_D = 0x44
VK_Q = 0x51
VK_Z = 0x5A

_SOURCE_NAMES = {
    GL_DEBUG_SOURCE_WINDOW_SYSTEM: "WindowSys",
    GL_DEBUG_SOURCE_APPLICATION: "App",
    GL_DEBUG_SOURCE_API: "OpenGL",
    GL_DEBUG_SOURCE_SHADER_COMPILER: "ShaderCompiler",
    GL_DEBUG_SOURCE_THIRD_PARTY: "3rdParty",
    GL_DEBUG_SOURCE_OTHER: "Other",
}

_TYPE_NAMES = {
    GL_DEBUG_TYPE_ERROR: "Error",
    GL_DEBUG_TYPE_DEPRECATED_BEHAVIOR: "Deprecated",
    GL_DEBUG_TYPE_UNDEFINED_BEHAVIOR: "Undefined",
    GL_DEBUG_TYPE_PORTABILITY: "Portability",
    GL_DEBUG_TYPE_PERFORMANCE: "Performance",
    GL_DEBUG_TYPE_MARKER: "Marker",
    GL_DEBUG_TYPE_PUSH_GROUP: "PushGrp",
    GL_DEBUG_TYPE_POP_GROUP: "PopGrp",
    GL_DEBUG_TYPE_OTHER: "Other",
}

_SEVERITY_NAMES = {
    GL_DEBUG_SEVERITY_HIGH: "HIGH",
    GL_DEBUG_SEVERITY_MEDIUM: "MED",
    GL_DEBUG_SEVERITY_LOW: "LOW",
    GL_DEBUG_SEVERITY_NOTIFICATION: "NOTIFY",
}

_ERROR_MESSAGES = {
    GL_INVALID_ENUM: "Invalid enum",
    GL_INVALID_VALUE: "Invalid value",
    GL_INVALID_OPERATION: "Invalid operation",
    GL_INVALID_FRAMEBUFFER_OPERATION: "Invalid framebuffer operation",
    GL_OUT_OF_MEMORY: "Out of memory",
}

_MATERIAL_SHADERS = {
    "image": ("image.vert", "image.frag"),
    "video": ("video.vert", "video.frag"),
    "ss": ("ss_display.vert", "ss_display.frag"),
}


def debug_message(source: int, gl_type: int, message_id: int,
                  severity: int, message: str) -> str:
    """Format a debug-callback report as ``source:type[severity](id): message``."""
    source_name = _SOURCE_NAMES.get(source, "Unknown")
    type_name = _TYPE_NAMES.get(gl_type, "Unknown")
    severity_name = _SEVERITY_NAMES.get(severity, "UNK")
    return f"{source_name}:{type_name}[{severity_name}]({message_id}): {message}"


def error_message(error: int) -> str:
    """Describe an OpenGL error code."""
    if error == GL_NO_ERROR:
        raise ValueError("GL_NO_ERROR is not an error")
    return _ERROR_MESSAGES.get(error, "Unknown error")


def texture_unit(index: int) -> int:
    """Texture unit enumerant for ``index``; indices outside 1..9 map to unit 0."""
    if 1 <= index <= 9:
        return GL_TEXTURE0 + index
    return GL_TEXTURE0


def texture_format(channels: int) -> tuple[int, int, int]:
    """Return (internal format, pixel format, pixel type) for a channel count.

    One channel is single-channel red, three is RGB, and anything else is
    treated as packed RGBA.
    """
    if channels == 1:
        return (GL_R8, GL_RED, GL_UNSIGNED_BYTE)
    if channels == 3:
        return (GL_RGB, GL_RGB, GL_UNSIGNED_BYTE)
    return (GL_RGBA8, GL_RGBA, GL_UNSIGNED_INT_8_8_8_8_REV)


def material_shader_files(kind: str) -> tuple[str, str]:
    """Vertex and fragment shader file names for a material kind.

    ``kind`` is one of ``"image"``, ``"video"`` or ``"ss"``.
    """
    try:
        return _MATERIAL_SHADERS[kind]
    except KeyError:
        raise ValueError(f"unknown material kind: {kind!r}") from None