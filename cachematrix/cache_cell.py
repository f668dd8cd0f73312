"""
CacheCell: a matrix paired with a lazily computed, cached inverse.

The cached inverse is only trustworthy while every change to the matrix goes
through ``set``. Mutating the held array in place (``cell.get()[0, 0] = 1``)
bypasses invalidation and leaves a stale inverse behind; replace the value
with ``set`` or build a new cell instead.
"""

from typing import Any, Optional


class CacheCell:
    """Holds one matrix value and at most one cached inverse for it."""

    def __init__(self, initial: Any):
        self._value = initial
        self._inverse: Optional[Any] = None

    def set(self, value: Any) -> None:
        """Replace the matrix and drop any cached inverse, even for equal content."""
        self._value = value
        self._inverse = None

    def get(self) -> Any:
        return self._value

    def set_cached_inverse(self, inverse: Any) -> None:
        # Trusted input: the caller has just computed the inverse of get()
        self._inverse = inverse

    def get_cached_inverse(self) -> Optional[Any]:
        return self._inverse

    @property
    def has_cached_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self):
        state = "cached" if self.has_cached_inverse else "empty"
        return f"CacheCell(shape={getattr(self._value, 'shape', None)}, inverse={state})"


def make_cache_cell(initial: Any) -> CacheCell:
    return CacheCell(initial)
