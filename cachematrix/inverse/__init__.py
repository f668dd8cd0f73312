"""
Matrix inversion backends.

Every backend takes an n x n matrix (nested sequence or ndarray) plus a
tolerance and returns a float64 ndarray, raising InvertibilityError for
empty, non-square, non-finite or singular input.
"""

import logging

import numpy as np

from cachematrix.config import BACKEND_NAMES, load_config

from . import gauss_jordan, lu_decomposition, lu_numpy
from .errors import InvertibilityError

logger = logging.getLogger(__name__)


def _naive(invert):
    def run(A, tol):
        return np.array(invert(lu_numpy.as_square(A).tolist(), tol=tol))
    return run


def _torch(A, tol, device=None):
    # torch is an optional extra, imported only when this backend is selected
    from . import lu_torch
    if device is None:
        device = load_config().torch_device
    return lu_torch.invert_matrix(A, tol=tol, device=device)


BACKENDS = {
    "numpy": lu_numpy.invert_builtin,
    "lu_numpy": lu_numpy.invert_matrix,
    "lu": _naive(lu_decomposition.invert_matrix),
    "gauss_jordan": _naive(gauss_jordan.invert_matrix),
    "torch": _torch,
}


def get_inverter(name):
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown backend {name!r}, expected one of {BACKEND_NAMES}") from None


def solve(a, tol=None, backend=None, device=None):
    """
    Return the inverse of the square matrix ``a``.

    Args:
        a: n x n matrix
        tol: singularity tolerance; defaults to the configured value
        backend: backend name; defaults to the configured value
        device: torch device for the ``torch`` backend; defaults to the
            configured value, ignored by the other backends

    Raises:
        InvertibilityError: if ``a`` is empty, non-square, non-finite or
            singular within tol
    """
    if tol is None or backend is None:
        config = load_config()
        tol = config.tol if tol is None else tol
        backend = config.backend if backend is None else backend

    inverter = get_inverter(backend)
    logger.debug(f"Inverting matrix with backend={backend} tol={tol:g}")
    if backend == "torch":
        return inverter(a, tol=tol, device=device)
    return inverter(a, tol=tol)


__all__ = ["BACKENDS", "InvertibilityError", "get_inverter", "solve"]
