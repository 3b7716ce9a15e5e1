import ctypes
import struct
from enum import Enum, IntEnum

from intvec.errors import ComponentRangeError
from intvec.utils.helpers import (
    INT32_MAX, INT32_MIN, UINT32_MAX,
    wrap_uint32, wrap_int32, trunc_div, mul_add,
    uint32s_to_bytes, int32s_to_bytes, bytes_to_uint32s, bytes_to_int32s,
)


class LogLevel(IntEnum): NONE = 0; DEBUG = 1; INFO = 2; WARNING = 3; ERROR = 4


class ElementKind(Enum):
    """
    Scalar type shared by every component of a vector.
    All arithmetic wraps at 32 bits; signed values use two's complement.
    """
    U32 = "I"  # struct / memoryview format code
    I32 = "i"

    @property
    def code(self) -> str:
        return self.value

    @property
    def signed(self) -> bool:
        return self is ElementKind.I32

    @property
    def size(self) -> int:
        """Bytes per component."""
        return struct.calcsize("=" + self.code)

    @property
    def min_value(self) -> int:
        return INT32_MIN if self.signed else 0

    @property
    def max_value(self) -> int:
        return INT32_MAX if self.signed else UINT32_MAX

    @property
    def ctype(self):
        return ctypes.c_int32 if self.signed else ctypes.c_uint32

    def wrap(self, value: int) -> int:
        return wrap_int32(value) if self.signed else wrap_uint32(value)

    def check(self, value: int) -> int:
        """Like ``wrap`` but rejects values that would need wrapping."""
        wrapped = self.wrap(value)
        if wrapped != value:
            raise ComponentRangeError(f"{value} does not fit in {self.name}")
        return wrapped

    def mul(self, a: int, b: int) -> int:
        return self.wrap(a * b)

    def neg(self, a: int) -> int:
        return self.wrap(-a)

    def div(self, a: int, b: int) -> int:
        return self.wrap(trunc_div(a, b))

    def mul_add(self, value: int, a: int, b: int) -> int:
        """Fused multiply-add: ``value * a + b`` in this kind's wrapping arithmetic."""
        return mul_add(value, a, b, self.wrap)

    def pack(self, values) -> bytes:
        return int32s_to_bytes(values) if self.signed else uint32s_to_bytes(values)

    def unpack(self, data: bytes, count: int, offset: int = 0) -> tuple:
        if len(data) - offset < count * self.size:
            raise ValueError(f"Not enough bytes to unpack {count} {self.name} values. Need {count * self.size}.")
        if self.signed:
            return bytes_to_int32s(data, count, offset)
        return bytes_to_uint32s(data, count, offset)
