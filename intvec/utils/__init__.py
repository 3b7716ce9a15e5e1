# This file marks intvec.utils as a Python package.

from .helpers import (
    UINT32_MASK,
    UINT32_MAX,
    INT32_MIN,
    INT32_MAX,
    wrap_uint32,
    wrap_int32,
    trunc_div,
    mul_add,
    uint32s_to_bytes,
    int32s_to_bytes,
    bytes_to_uint32s,
    bytes_to_int32s,
    clamp,
)

__all__ = [
    # Constants
    "UINT32_MASK", "UINT32_MAX", "INT32_MIN", "INT32_MAX",
    # Fixed-width arithmetic
    "wrap_uint32", "wrap_int32", "trunc_div", "mul_add",
    # Byte/Numeric Conversion
    "uint32s_to_bytes", "int32s_to_bytes", "bytes_to_uint32s", "bytes_to_int32s",
    # Other Utilities
    "clamp",
]
