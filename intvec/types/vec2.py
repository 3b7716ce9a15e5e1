import dataclasses
import logging
from typing import ClassVar

from intvec.errors import HomogeneousDivideError
from intvec.types.convert import narrow, resize
from intvec.types.enums import ElementKind
from intvec.types.vecbase import VecBase

logger = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class Vec2(VecBase):
    """
    A set of two coordinates which may be interpreted as a vector or point in 2d space.

    Whether a value is a point or a vector only matters when converting to and
    from homogeneous coordinates, so it is not tracked on the type.
    """
    x: int = 0
    y: int = 0

    DIM: ClassVar[int] = 2
    _FIELDS: ClassVar[tuple] = ("x", "y")

    def __str__(self) -> str:
        return f"<{self.x}, {self.y}>"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y})"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.x, self.y))

    @classmethod
    def unit_x(cls) -> "Vec2":
        return cls(1, 0)

    @classmethod
    def unit_y(cls) -> "Vec2":
        return cls(0, 1)

    # --- Arithmetic ---

    def __add__(self, other: "Vec2") -> "Vec2":
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vec2") -> "Vec2":
        if type(other) is not type(self):
            return NotImplemented
        self._assign(self.x + other.x, self.y + other.y)
        return self

    def __sub__(self, other: "Vec2") -> "Vec2":
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y)

    def __isub__(self, other: "Vec2") -> "Vec2":
        if type(other) is not type(self):
            return NotImplemented
        self._assign(self.x - other.x, self.y - other.y)
        return self

    def __mul__(self, other) -> "Vec2":
        if type(other) is type(self):
            return type(self)(self.x * other.x, self.y * other.y)
        if isinstance(other, int):
            s = self.ELEMENT.wrap(other)
            return type(self)(self.x * s, self.y * s)
        return NotImplemented

    def __rmul__(self, scalar: int) -> "Vec2":
        if not isinstance(scalar, int):
            return NotImplemented
        return self.__mul__(scalar)

    def __imul__(self, other) -> "Vec2":
        if type(other) is type(self):
            self._assign(self.x * other.x, self.y * other.y)
        elif isinstance(other, int):
            s = self.ELEMENT.wrap(other)
            self._assign(self.x * s, self.y * s)
        else:
            return NotImplemented
        return self

    def __truediv__(self, other) -> "Vec2":
        k = self.ELEMENT
        if type(other) is type(self):
            return type(self)(k.div(self.x, other.x), k.div(self.y, other.y))
        if isinstance(other, int):
            s = k.wrap(other)
            return type(self)(k.div(self.x, s), k.div(self.y, s))
        return NotImplemented

    def __itruediv__(self, other) -> "Vec2":
        k = self.ELEMENT
        if type(other) is type(self):
            self._assign(k.div(self.x, other.x), k.div(self.y, other.y))
        elif isinstance(other, int):
            s = k.wrap(other)
            self._assign(k.div(self.x, s), k.div(self.y, s))
        else:
            return NotImplemented
        return self

    # --- Geometry ---

    def dot(self, other: "Vec2") -> int:
        """Dot product, x*ox folded onto y*oy with one fused multiply-add."""
        if type(other) is not type(self):
            raise TypeError(f"Can only calculate dot product with another {type(self).__name__}.")
        k = self.ELEMENT
        return k.mul_add(self.x, other.x, k.mul(self.y, other.y))

    def mag_sq(self) -> int:
        k = self.ELEMENT
        return k.mul_add(self.x, self.x, k.mul(self.y, self.y))

    def reflected(self, normal: "Vec2") -> "Vec2":
        """Reflects about ``normal``: v - 2 (v . n) n."""
        return self - self.ELEMENT.mul(2, self.dot(normal)) * normal

    # --- Homogeneous coordinates ---

    def into_homogeneous_point(self):
        """Homogeneous 2d *point*: the extra component starts at 1."""
        return self._sibling(3)(self.x, self.y, 1)

    def into_homogeneous_vector(self):
        """Homogeneous 2d *vector*: the extra component is always 0."""
        return self._sibling(3)(self.x, self.y, 0)

    @classmethod
    def from_homogeneous_point(cls, v) -> "Vec2":
        """
        2d point from a homogeneous 2d *point*, dividing by the homogeneous
        component. Homogeneous *vectors* have 0 there and must use
        from_homogeneous_vector instead.
        """
        cls._expect(v, 3)
        if v.z == 0:
            logger.error(f"Homogeneous divide by zero narrowing {v!r}")
            raise HomogeneousDivideError(f"{v!r} has a zero homogeneous component")
        k = cls.ELEMENT
        return cls(k.div(v.x, v.z), k.div(v.y, v.z))

    @classmethod
    def from_homogeneous_vector(cls, v) -> "Vec2":
        """2d vector from a homogeneous 2d *vector*; the homogeneous component is discarded."""
        cls._expect(v, 3)
        return narrow(v)

    # --- Plain dimension changes ---

    def xyz(self):
        return resize(self, 3)

    def xyzw(self):
        return resize(self, 4)


class Vec2u(Vec2):
    """Vec2 with unsigned 32-bit components."""
    __slots__ = ()
    ELEMENT = ElementKind.U32


class Vec2i(Vec2):
    """Vec2 with signed 32-bit components."""
    __slots__ = ()
    ELEMENT = ElementKind.I32
