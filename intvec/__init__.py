# Basic package metadata.

__version__ = "0.1.0"

# The types sub-package has to load before settings: settings reads LogLevel
# from it, and the vector types read Settings at construction.
from .types import (
    ElementKind, LogLevel, Layout,
    Vec2, Vec2u, Vec2i,
    Vec3, Vec3u, Vec3i,
    Vec4, Vec4u, Vec4i,
    family, resize, narrow, widen, convert,
)
from .settings import Settings, configure_logging
from .errors import (
    IntVecError, ContractViolationError, ComponentIndexError,
    HomogeneousDivideError, ComponentRangeError, ViewLifetimeError,
)

__all__ = [
    "__version__",
    "ElementKind", "LogLevel", "Layout",
    "Vec2", "Vec2u", "Vec2i",
    "Vec3", "Vec3u", "Vec3i",
    "Vec4", "Vec4u", "Vec4i",
    "family", "resize", "narrow", "widen", "convert",
    "Settings", "configure_logging",
    "IntVecError", "ContractViolationError", "ComponentIndexError",
    "HomogeneousDivideError", "ComponentRangeError", "ViewLifetimeError",
]
