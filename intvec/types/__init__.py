# Main __init__.py for the types sub-package

from .enums import ElementKind, LogLevel
from .memory import Layout, RawView, PointerView
from .vecbase import VecBase
from .vec2 import Vec2, Vec2u, Vec2i
from .vec3 import Vec3, Vec3u, Vec3i
from .vec4 import Vec4, Vec4u, Vec4i
from .convert import family, resize, narrow, widen, convert


__all__ = [
    "ElementKind", "LogLevel",
    "Layout", "RawView", "PointerView",
    "VecBase",
    "Vec2", "Vec2u", "Vec2i",
    "Vec3", "Vec3u", "Vec3i",
    "Vec4", "Vec4u", "Vec4i",
    "family", "resize", "narrow", "widen", "convert",
]
