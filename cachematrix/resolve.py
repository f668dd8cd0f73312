import logging
from typing import Any, Callable, Optional

from cachematrix.cache_cell import CacheCell
from cachematrix.inverse import solve

logger = logging.getLogger(__name__)


def resolve_inverse(cell: CacheCell, inverter: Optional[Callable[..., Any]] = None, **options) -> Any:
    """
    Return the inverse of the matrix held by ``cell``, computing it at most once.

    On a hit the cached inverse is returned untouched. On a miss ``inverter``
    (``cachematrix.inverse.solve`` by default) is called with the current value
    and ``options``, and its result is stored in the cell. Errors raised by the
    inverter propagate unchanged and leave the cell as it was.
    """
    m = cell.get_cached_inverse()
    if m is not None:
        logger.info("Getting cached matrix inverse")
        return m

    if inverter is None:
        inverter = solve

    logger.debug("Cache miss, computing matrix inverse")
    m = inverter(cell.get(), **options)
    cell.set_cached_inverse(m)
    return m
