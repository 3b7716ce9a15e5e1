import dataclasses
import logging
from typing import ClassVar

from intvec.errors import HomogeneousDivideError
from intvec.types.convert import narrow, resize
from intvec.types.enums import ElementKind
from intvec.types.vecbase import VecBase

logger = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class Vec3(VecBase):
    """
    A set of three coordinates which may be interpreted as a point or vector in
    3d space, or as a homogeneous 2d vector or point (x, y, w=z).
    """
    x: int = 0
    y: int = 0
    z: int = 0

    DIM: ClassVar[int] = 3
    _FIELDS: ClassVar[tuple] = ("x", "y", "z")

    def __str__(self) -> str:
        return f"<{self.x}, {self.y}, {self.z}>"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y}, z={self.z})"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.x, self.y, self.z))

    @classmethod
    def unit_x(cls) -> "Vec3":
        return cls(1, 0, 0)

    @classmethod
    def unit_y(cls) -> "Vec3":
        return cls(0, 1, 0)

    @classmethod
    def unit_z(cls) -> "Vec3":
        return cls(0, 0, 1)

    # --- Arithmetic ---

    def __add__(self, other: "Vec3") -> "Vec3":
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: "Vec3") -> "Vec3":
        if type(other) is not type(self):
            return NotImplemented
        self._assign(self.x + other.x, self.y + other.y, self.z + other.z)
        return self

    def __sub__(self, other: "Vec3") -> "Vec3":
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y, self.z - other.z)

    def __isub__(self, other: "Vec3") -> "Vec3":
        if type(other) is not type(self):
            return NotImplemented
        self._assign(self.x - other.x, self.y - other.y, self.z - other.z)
        return self

    def __mul__(self, other) -> "Vec3":
        if type(other) is type(self):
            return type(self)(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, int):
            s = self.ELEMENT.wrap(other)
            return type(self)(self.x * s, self.y * s, self.z * s)
        return NotImplemented

    def __rmul__(self, scalar: int) -> "Vec3":
        if not isinstance(scalar, int):
            return NotImplemented
        return self.__mul__(scalar)

    def __imul__(self, other) -> "Vec3":
        if type(other) is type(self):
            self._assign(self.x * other.x, self.y * other.y, self.z * other.z)
        elif isinstance(other, int):
            s = self.ELEMENT.wrap(other)
            self._assign(self.x * s, self.y * s, self.z * s)
        else:
            return NotImplemented
        return self

    def __truediv__(self, other) -> "Vec3":
        k = self.ELEMENT
        if type(other) is type(self):
            return type(self)(k.div(self.x, other.x), k.div(self.y, other.y), k.div(self.z, other.z))
        if isinstance(other, int):
            s = k.wrap(other)
            return type(self)(k.div(self.x, s), k.div(self.y, s), k.div(self.z, s))
        return NotImplemented

    def __itruediv__(self, other) -> "Vec3":
        k = self.ELEMENT
        if type(other) is type(self):
            self._assign(k.div(self.x, other.x), k.div(self.y, other.y), k.div(self.z, other.z))
        elif isinstance(other, int):
            s = k.wrap(other)
            self._assign(k.div(self.x, s), k.div(self.y, s), k.div(self.z, s))
        else:
            return NotImplemented
        return self

    # --- Geometry ---

    def dot(self, other: "Vec3") -> int:
        """Dot product as right-nested fused multiply-adds: x*ox + (y*oy + z*oz)."""
        if type(other) is not type(self):
            raise TypeError(f"Can only calculate dot product with another {type(self).__name__}.")
        k = self.ELEMENT
        return k.mul_add(self.x, other.x, k.mul_add(self.y, other.y, k.mul(self.z, other.z)))

    def cross(self, other: "Vec3") -> "Vec3":
        """
        Cross product. Each component is one fused multiply-add of a product
        pair plus the negated other pair, e.g. y.mul_add(oz, (-z) * oy).
        Unsigned components negate by wrapping.
        """
        if type(other) is not type(self):
            raise TypeError(f"Can only calculate cross product with another {type(self).__name__}.")
        k = self.ELEMENT
        return type(self)(
            k.mul_add(self.y, other.z, k.mul(k.neg(self.z), other.y)),
            k.mul_add(self.z, other.x, k.mul(k.neg(self.x), other.z)),
            k.mul_add(self.x, other.y, k.mul(k.neg(self.y), other.x)),
        )

    def mag_sq(self) -> int:
        k = self.ELEMENT
        return k.mul_add(self.x, self.x, k.mul_add(self.y, self.y, k.mul(self.z, self.z)))

    def reflect(self, normal: "Vec3"):
        """Reflects in place about ``normal``: v -= 2 (v . n) n."""
        self -= self.ELEMENT.mul(2, self.dot(normal)) * normal

    def reflected(self, normal: "Vec3") -> "Vec3":
        a = self.copy()
        a.reflect(normal)
        return a

    # --- Homogeneous coordinates ---

    def into_homogeneous_point(self):
        """Homogeneous 3d *point*: the extra component starts at 1."""
        return self._sibling(4)(self.x, self.y, self.z, 1)

    def into_homogeneous_vector(self):
        """Homogeneous 3d *vector*: the extra component is always 0."""
        return self._sibling(4)(self.x, self.y, self.z, 0)

    @classmethod
    def from_homogeneous_point(cls, v) -> "Vec3":
        """
        3d point from a homogeneous 3d *point*, dividing by the homogeneous
        component. Homogeneous *vectors* have 0 there and must use
        from_homogeneous_vector instead.
        """
        cls._expect(v, 4)
        if v.w == 0:
            logger.error(f"Homogeneous divide by zero narrowing {v!r}")
            raise HomogeneousDivideError(f"{v!r} has a zero homogeneous component")
        k = cls.ELEMENT
        return cls(k.div(v.x, v.w), k.div(v.y, v.w), k.div(v.z, v.w))

    @classmethod
    def from_homogeneous_vector(cls, v) -> "Vec3":
        """3d vector from a homogeneous 3d *vector*; the homogeneous component is discarded."""
        cls._expect(v, 4)
        return narrow(v)

    # --- Plain dimension changes ---

    def xy(self):
        return resize(self, 2)

    def xyzw(self):
        return resize(self, 4)


class Vec3u(Vec3):
    """Vec3 with unsigned 32-bit components."""
    __slots__ = ()
    ELEMENT = ElementKind.U32


class Vec3i(Vec3):
    """Vec3 with signed 32-bit components."""
    __slots__ = ()
    ELEMENT = ElementKind.I32


if __name__ == '__main__':
    a = Vec3i(1, 2, 3)
    b = Vec3i(4, 5, 6)
    print(f"a + b = {a + b}")
    print(f"a . b = {a.dot(b)}")
    print(f"a x b = {a.cross(b)}")
    assert a.cross(b) == Vec3i(-3, 6, -3)
    assert Vec3i.unit_x().cross(Vec3i.unit_y()) == Vec3i.unit_z()
    print(f"a as point: {a.into_homogeneous_point()}")
    print("Vec3 checks passed.")
