"""
Behaviour shared by every vector type, independent of dimension.

Concrete types are slotted dataclasses (see vec2/vec3/vec4) that pick an
ElementKind and a dimension. Per-dimension modules spell out arithmetic and
the dot-product nesting; everything that is a plain loop over components
lives here.
"""
import logging
import math
import operator
from typing import Callable, ClassVar

from intvec.errors import ComponentIndexError
from intvec.settings import Settings
from intvec.types.enums import ElementKind
from intvec.types.memory import Layout, PointerView, RawView
from intvec.utils.helpers import clamp

logger = logging.getLogger(__name__)


class VecBase:
    __slots__ = ()

    ELEMENT: ClassVar[ElementKind | None] = None
    DIM: ClassVar[int] = 0
    _FIELDS: ClassVar[tuple] = ()

    # (ElementKind, DIM) -> concrete class
    _FAMILY: ClassVar[dict] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("ELEMENT") is not None:
            VecBase._FAMILY[(cls.ELEMENT, cls.DIM)] = cls

    @staticmethod
    def family_member(kind: ElementKind, dim: int) -> type:
        """Returns the concrete vector class for an element kind and dimension."""
        try:
            return VecBase._FAMILY[(kind, dim)]
        except KeyError:
            raise TypeError(f"No {dim}-component vector of element kind {kind}") from None

    @classmethod
    def _sibling(cls, dim: int) -> type:
        return VecBase.family_member(cls.ELEMENT, dim)

    @classmethod
    def _expect(cls, v, dim: int):
        expected = cls._sibling(dim)
        if type(v) is not expected:
            raise TypeError(f"Expected {expected.__name__}, got {type(v).__name__}")
        return v

    def __post_init__(self):
        if self.ELEMENT is None:
            raise TypeError(f"{type(self).__name__} has no element kind; use its u32 or i32 variant.")
        self._assign(*self._components())

    def _components(self) -> tuple:
        return tuple(getattr(self, name) for name in self._FIELDS)

    def _assign(self, *components):
        """Stores all components, wrapped (or range-checked in strict mode)."""
        coerce = self.ELEMENT.check if Settings.STRICT_COMPONENTS else self.ELEMENT.wrap
        values = [coerce(value) for value in components]
        for name, value in zip(self._FIELDS, values, strict=True):
            setattr(self, name, value)

    # --- Construction ---

    @classmethod
    def new(cls, *components):
        """Builds a vector from exactly DIM components."""
        if len(components) != cls.DIM:
            raise TypeError(f"{cls.__name__}.new() takes {cls.DIM} components, got {len(components)}")
        return cls(*components)

    @classmethod
    def broadcast(cls, value: int):
        return cls(*([value] * cls.DIM))

    @classmethod
    def zero(cls):
        return cls.broadcast(0)

    @classmethod
    def one(cls):
        return cls.broadcast(1)

    @classmethod
    def from_array(cls, components):
        """Copies a fixed-length sequence (list, tuple, array.array, memoryview...)."""
        components = list(components)
        if len(components) != cls.DIM:
            raise ValueError(f"{cls.__name__} needs {cls.DIM} components, got {len(components)}.")
        return cls(*components)

    @classmethod
    def from_tuple(cls, components: tuple):
        if not isinstance(components, tuple):
            raise TypeError(f"Expected a tuple, got {type(components).__name__}")
        return cls.from_array(components)

    def to_array(self) -> list:
        return list(self._components())

    def to_tuple(self) -> tuple:
        return self._components()

    def copy(self):
        return type(self)(*self._components())

    __copy__ = copy

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return self.DIM

    def __iter__(self):
        return iter(self._components())

    def _check_index(self, index) -> int:
        index = operator.index(index)
        if not 0 <= index < self.DIM:
            logger.error(f"Component index {index} out of range for {type(self).__name__}")
            raise ComponentIndexError(f"Invalid index {index} for vector of type {type(self).__name__}")
        return index

    def __getitem__(self, index) -> int:
        return getattr(self, self._FIELDS[self._check_index(index)])

    def __setitem__(self, index, value: int):
        index = self._check_index(index)
        components = list(self._components())
        components[index] = value
        self._assign(*components)

    # --- Component-wise utilities ---

    def __neg__(self):
        if not self.ELEMENT.signed:
            raise TypeError(f"bad operand type for unary -: '{type(self).__name__}'")
        return type(self)(*(-c for c in self._components()))

    def abs(self):
        """
        Returns a copy with the same components. The signed family does not
        negate negative components; existing callers depend on that.
        """
        return type(self)(*self._components())

    def __abs__(self):
        return self.abs()

    def clamp(self, min, max):
        """Clamps each component into [min, max] in place."""
        self._assign(*(clamp(c, lo, hi) for c, lo, hi in zip(self, min, max)))

    def clamped(self, min, max):
        result = self.copy()
        result.clamp(min, max)
        return result

    def map(self, f: Callable[[int], int]):
        return type(self)(*(f(c) for c in self._components()))

    def apply(self, f: Callable[[int], int]):
        self._assign(*(f(c) for c in self._components()))

    def max_by_component(self, other):
        return type(self)(*(max(a, b) for a, b in zip(self, other)))

    def min_by_component(self, other):
        return type(self)(*(min(a, b) for a, b in zip(self, other)))

    def component_max(self) -> int:
        return max(self._components())

    def component_min(self) -> int:
        return min(self._components())

    def mag(self) -> int:
        """
        sqrt(mag_sq()) through a float64 intermediate, truncated toward zero.
        Treat it as an approximation. A signed mag_sq that wrapped negative
        gives 0.
        """
        sq = self.mag_sq()
        if sq <= 0:
            return 0
        return self.ELEMENT.wrap(int(math.sqrt(float(sq))))

    def mul_add(self, mul, add):
        """Component-wise fused multiply-add: self * mul + add."""
        k = self.ELEMENT
        return type(self)(*(k.mul_add(s, m, a) for s, m, a in zip(self, mul, add)))

    # --- Raw memory ---

    @classmethod
    def layout(cls) -> Layout:
        return Layout(size=cls.DIM * cls.ELEMENT.size, align=cls.ELEMENT.size)

    def to_bytes(self) -> bytes:
        """Packs the components into DIM * 4 native-endian bytes."""
        return self.ELEMENT.pack(self._components())

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0):
        """Unpacks DIM native-endian components starting at offset."""
        return cls(*cls.ELEMENT.unpack(data, cls.DIM, offset))

    def as_slice(self) -> RawView:
        return RawView(self, self.ELEMENT.code)

    def as_mut_slice(self) -> RawView:
        return RawView(self, self.ELEMENT.code, writable=True)

    def as_byte_slice(self) -> RawView:
        return RawView(self, "B")

    def as_mut_byte_slice(self) -> RawView:
        return RawView(self, "B", writable=True)

    def as_ptr(self) -> PointerView:
        return PointerView(self, writable=False)

    def as_mut_ptr(self) -> PointerView:
        return PointerView(self, writable=True)
