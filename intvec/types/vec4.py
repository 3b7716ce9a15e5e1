import dataclasses
from typing import ClassVar

from intvec.types.convert import resize
from intvec.types.enums import ElementKind
from intvec.types.vecbase import VecBase


@dataclasses.dataclass(slots=True)
class Vec4(VecBase):
    """
    A set of four coordinates which may be interpreted as a point or vector in
    4d space, or as a homogeneous 3d vector or point.

    Narrowing back to 3d goes through Vec3.from_homogeneous_point (divides by w)
    or Vec3.from_homogeneous_vector / xyz() (drops w).
    """
    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0

    DIM: ClassVar[int] = 4
    _FIELDS: ClassVar[tuple] = ("x", "y", "z", "w")

    def __str__(self) -> str:
        return f"<{self.x}, {self.y}, {self.z}, {self.w}>"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y}, z={self.z}, w={self.w})"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z and self.w == other.w

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.x, self.y, self.z, self.w))

    @classmethod
    def unit_x(cls) -> "Vec4":
        return cls(1, 0, 0, 0)

    @classmethod
    def unit_y(cls) -> "Vec4":
        return cls(0, 1, 0, 0)

    @classmethod
    def unit_z(cls) -> "Vec4":
        return cls(0, 0, 1, 0)

    @classmethod
    def unit_w(cls) -> "Vec4":
        return cls(0, 0, 0, 1)

    # --- Arithmetic ---

    def __add__(self, other: "Vec4") -> "Vec4":
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __iadd__(self, other: "Vec4") -> "Vec4":
        if type(other) is not type(self):
            return NotImplemented
        self._assign(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)
        return self

    def __sub__(self, other: "Vec4") -> "Vec4":
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __isub__(self, other: "Vec4") -> "Vec4":
        if type(other) is not type(self):
            return NotImplemented
        self._assign(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)
        return self

    def __mul__(self, other) -> "Vec4":
        if type(other) is type(self):
            return type(self)(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)
        if isinstance(other, int):
            s = self.ELEMENT.wrap(other)
            return type(self)(self.x * s, self.y * s, self.z * s, self.w * s)
        return NotImplemented

    def __rmul__(self, scalar: int) -> "Vec4":
        if not isinstance(scalar, int):
            return NotImplemented
        return self.__mul__(scalar)

    def __imul__(self, other) -> "Vec4":
        if type(other) is type(self):
            self._assign(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)
        elif isinstance(other, int):
            s = self.ELEMENT.wrap(other)
            self._assign(self.x * s, self.y * s, self.z * s, self.w * s)
        else:
            return NotImplemented
        return self

    def __truediv__(self, other) -> "Vec4":
        k = self.ELEMENT
        if type(other) is type(self):
            return type(self)(
                k.div(self.x, other.x), k.div(self.y, other.y),
                k.div(self.z, other.z), k.div(self.w, other.w),
            )
        if isinstance(other, int):
            s = k.wrap(other)
            return type(self)(k.div(self.x, s), k.div(self.y, s), k.div(self.z, s), k.div(self.w, s))
        return NotImplemented

    def __itruediv__(self, other) -> "Vec4":
        k = self.ELEMENT
        if type(other) is type(self):
            self._assign(
                k.div(self.x, other.x), k.div(self.y, other.y),
                k.div(self.z, other.z), k.div(self.w, other.w),
            )
        elif isinstance(other, int):
            s = k.wrap(other)
            self._assign(k.div(self.x, s), k.div(self.y, s), k.div(self.z, s), k.div(self.w, s))
        else:
            return NotImplemented
        return self

    # --- Geometry ---

    def dot(self, other: "Vec4") -> int:
        """Dot product as right-nested fused multiply-adds: x*ox + (y*oy + (z*oz + w*ow))."""
        if type(other) is not type(self):
            raise TypeError(f"Can only calculate dot product with another {type(self).__name__}.")
        k = self.ELEMENT
        return k.mul_add(
            self.x, other.x,
            k.mul_add(self.y, other.y, k.mul_add(self.z, other.z, k.mul(self.w, other.w))),
        )

    def mag_sq(self) -> int:
        k = self.ELEMENT
        return k.mul_add(
            self.x, self.x,
            k.mul_add(self.y, self.y, k.mul_add(self.z, self.z, k.mul(self.w, self.w))),
        )

    def reflect(self, normal: "Vec4"):
        """Reflects in place about ``normal``: v -= 2 (v . n) n."""
        self -= self.ELEMENT.mul(2, self.dot(normal)) * normal

    def reflected(self, normal: "Vec4") -> "Vec4":
        a = self.copy()
        a.reflect(normal)
        return a

    # --- Plain dimension changes ---

    def xy(self):
        return resize(self, 2)

    def xyz(self):
        return resize(self, 3)


class Vec4u(Vec4):
    """Vec4 with unsigned 32-bit components."""
    __slots__ = ()
    ELEMENT = ElementKind.U32


class Vec4i(Vec4):
    """Vec4 with signed 32-bit components."""
    __slots__ = ()
    ELEMENT = ElementKind.I32
