"""
Raw memory views over a vector's packed component storage.

A vector's components are laid out as a flat, unpadded run of its element
kind in declaration order (x, y[, z[, w]]), native byte order. The views here
hand that run to external code for the duration of a ``with`` block:

    with v.as_mut_slice() as comps:
        comps[0] = 7            # v.x == 7 after the block

    with v.as_byte_slice() as raw:
        upload(raw)             # DIM * 4 bytes

Views are released when the block exits. Keeping one past that point is a
contract violation: a memoryview that is still exported raises
ViewLifetimeError, a released one raises ValueError on use. Pointers from
``as_ptr`` cannot be invalidated by Python and must simply not be kept.
"""
import ctypes
import dataclasses
import logging

from intvec.errors import ViewLifetimeError

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Layout:
    """Size and alignment, in bytes, needed to allocate one vector."""
    size: int
    align: int

    def __str__(self) -> str:
        return f"<size={self.size}, align={self.align}>"


class _PackedBuffer:
    """Packs a vector into a bytearray on enter, optionally writes it back on exit."""

    def __init__(self, vec, writable: bool):
        self._vec = vec
        self._writable = writable
        self._buffer = None

    def _open(self) -> bytearray:
        self._buffer = bytearray(self._vec.to_bytes())
        return self._buffer

    def _close(self):
        if self._writable:
            kind = self._vec.ELEMENT
            self._vec._assign(*kind.unpack(self._buffer, self._vec.DIM))
            logger.debug(f"Wrote view back into {self._vec!r}")
        self._buffer = None


class RawView(_PackedBuffer):
    """
    Context manager yielding a memoryview of the packed components.
    ``fmt`` is the element kind's code for element views or ``"B"`` for bytes.
    """

    def __init__(self, vec, fmt: str, writable: bool = False):
        super().__init__(vec, writable)
        self._fmt = fmt
        self._base = None
        self._cast = None
        self._view = None

    def __enter__(self) -> memoryview:
        self._base = memoryview(self._open())
        self._cast = self._base.cast(self._fmt)
        self._view = self._cast if self._writable else self._cast.toreadonly()
        return self._view

    def __exit__(self, exc_type, exc, tb):
        try:
            self._close()
        finally:
            views = [self._view, self._cast, self._base]
            self._view = self._cast = self._base = None
            for view in views:
                try:
                    view.release()
                except BufferError as e:
                    logger.error(f"View of {type(self._vec).__name__} retained past its block: {e}")
                    raise ViewLifetimeError(
                        f"view of {type(self._vec).__name__} is still exported"
                    ) from e
        return False


class PointerView(_PackedBuffer):
    """Context manager yielding a ctypes pointer to the first packed component."""

    def __enter__(self):
        kind = self._vec.ELEMENT
        array = (kind.ctype * self._vec.DIM).from_buffer(self._open())
        self._array = array
        return ctypes.cast(array, ctypes.POINTER(kind.ctype))

    def __exit__(self, exc_type, exc, tb):
        self._array = None
        self._close()
        return False
