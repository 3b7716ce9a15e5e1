"""
Exception types raised by intvec.

Everything below ``ContractViolationError`` signals a caller bug. The library
never catches these; an unhandled one ends the program with a traceback.
"""


class IntVecError(Exception):
    """Base error for the package."""


class ContractViolationError(IntVecError):
    """A caller broke a precondition of a vector operation."""


class ComponentIndexError(ContractViolationError, IndexError):
    """Component position outside ``0..DIM-1``."""


class HomogeneousDivideError(ContractViolationError, ZeroDivisionError):
    """Homogeneous point narrowing with a zero homogeneous component."""


class ComponentRangeError(ContractViolationError, ValueError):
    """Component value outside the element kind's range (strict mode only)."""


class ViewLifetimeError(ContractViolationError, BufferError):
    """A raw view was still exported when its vector reclaimed the storage."""
