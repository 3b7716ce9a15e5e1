import operator
import struct

# Constants
UINT32_MASK = 0xFFFFFFFF
UINT32_MAX = UINT32_MASK
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

# --- Fixed-width wrapping ---

def wrap_uint32(value: int) -> int:
    """Reduces an integer modulo 2**32 into the unsigned 32-bit range."""
    return operator.index(value) & UINT32_MASK

def wrap_int32(value: int) -> int:
    """Reduces an integer into the signed 32-bit range (two's complement)."""
    value = operator.index(value) & UINT32_MASK
    if value > INT32_MAX:
        value -= 1 << 32
    return value

def trunc_div(a: int, b: int) -> int:
    """
    Integer division rounding toward zero, the way fixed-width machine
    integers divide. Python's ``//`` floors instead, which differs for
    operands of opposite sign.
    """
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q

def mul_add(value: int, a: int, b: int, wrap) -> int:
    """
    Computes ``value * a + b`` and reduces it with ``wrap``.
    Wrapping arithmetic is modular, so a single reduction of the exact result
    equals a wrapping multiply followed by a wrapping add.
    """
    return wrap(operator.index(value) * operator.index(a) + operator.index(b))

# --- Byte/Numeric Conversion Functions (native order, standard sizes) ---

def uint32s_to_bytes(values) -> bytes:
    """Packs unsigned 32-bit integers into native-endian bytes."""
    values = tuple(values)
    return struct.pack(f'={len(values)}I', *values)

def int32s_to_bytes(values) -> bytes:
    """Packs signed 32-bit integers into native-endian bytes."""
    values = tuple(values)
    return struct.pack(f'={len(values)}i', *values)

def bytes_to_uint32s(data: bytes, count: int, offset: int = 0) -> tuple:
    """Unpacks ``count`` native-endian unsigned 32-bit integers."""
    return struct.unpack_from(f'={count}I', data, offset)

def bytes_to_int32s(data: bytes, count: int, offset: int = 0) -> tuple:
    """Unpacks ``count`` native-endian signed 32-bit integers."""
    return struct.unpack_from(f'={count}i', data, offset)

# --- Other Utilities ---

def clamp(value, min_val, max_val):
    """Raises value to min_val, then lowers it to max_val (max wins if the bounds cross)."""
    return min(max(value, min_val), max_val)
