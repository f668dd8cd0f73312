"""
cachematrix: memoized matrix inversion.

    cell = make_cache_cell(A)
    A_inv = resolve_inverse(cell)   # computed
    A_inv = resolve_inverse(cell)   # cached
    cell.set(B)                     # invalidates
"""

from .cache_cell import CacheCell, make_cache_cell
from .config import InverseConfig, load_config
from .inverse import InvertibilityError, solve
from .resolve import resolve_inverse

__all__ = [
    "CacheCell",
    "InverseConfig",
    "InvertibilityError",
    "load_config",
    "make_cache_cell",
    "resolve_inverse",
    "solve",
]
