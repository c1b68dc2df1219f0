"""Fixed-size bitmap tracking which slots of a page are occupied."""

from __future__ import annotations


class Bitmap:
    """A packed array of bits, eight per byte."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("bitmap size must not be negative")
        self.size = size
        self._bytes = bytearray((size + 7) // 8)

    def _check(self, index: int) -> None:
        # Bounds follow the byte storage, so the padding bits of the last
        # byte are addressable, as they are in the on-page layout.
        if not 0 <= index < len(self._bytes) * 8:
            raise IndexError("Index out of bounds for bitmap.")

    def set(self, index: int) -> None:
        """Mark the bit at ``index``."""
        self._check(index)
        self._bytes[index // 8] |= 1 << (index % 8)

    def clear(self, index: int) -> None:
        """Unmark the bit at ``index``."""
        self._check(index)
        self._bytes[index // 8] &= ~(1 << (index % 8)) & 0xFF

    def test(self, index: int) -> bool:
        """Return whether the bit at ``index`` is set."""
        self._check(index)
        return bool(self._bytes[index // 8] & (1 << (index % 8)))

    def first_clear(self) -> int | None:
        """Return the lowest unset index below ``size``, or None if all are set."""
        return next((i for i in range(self.size) if not self.test(i)), None)

    def __bytes__(self) -> bytes:
        return bytes(self._bytes)