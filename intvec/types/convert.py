"""
Plain dimensionality conversions: truncation and zero-extension within one
element kind. These never divide and never append a homogeneous 1; see the
into_/from_homogeneous_* methods for that.
"""
from intvec.types.enums import ElementKind
from intvec.types.vecbase import VecBase


def family(kind: ElementKind) -> tuple:
    """(Vec2, Vec3, Vec4) classes for an element kind."""
    return tuple(VecBase.family_member(kind, dim) for dim in (2, 3, 4))


def _require_vector(v):
    if not isinstance(v, VecBase):
        raise TypeError(f"Expected a vector, got {type(v).__name__}")


def resize(v, dim: int):
    """Drops trailing components or appends zeros until ``v`` has ``dim`` components."""
    _require_vector(v)
    target = VecBase.family_member(v.ELEMENT, dim)
    components = v.to_array()[:dim]
    components += [0] * (dim - len(components))
    return target(*components)


def narrow(v):
    """Vec3 -> Vec2 (drops z), Vec4 -> Vec3 (drops w)."""
    _require_vector(v)
    if v.DIM <= 2:
        raise TypeError(f"Cannot narrow {type(v).__name__}")
    return resize(v, v.DIM - 1)


def widen(v):
    """Vec2 -> Vec3 (z = 0), Vec3 -> Vec4 (w = 0)."""
    _require_vector(v)
    if v.DIM >= 4:
        raise TypeError(f"Cannot widen {type(v).__name__}")
    return resize(v, v.DIM + 1)


def convert(v, target: type):
    """Resizes ``v`` into ``target``, which must share its element kind."""
    if not (isinstance(target, type) and issubclass(target, VecBase)) or target.ELEMENT is None:
        raise TypeError(f"{target!r} is not a concrete vector type")
    if isinstance(v, VecBase) and v.ELEMENT is not target.ELEMENT:
        raise TypeError(f"Cannot convert {type(v).__name__} to {target.__name__}: element kinds differ")
    return resize(v, target.DIM)
