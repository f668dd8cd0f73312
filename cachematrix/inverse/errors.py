import numpy as np


class InvertibilityError(np.linalg.LinAlgError):
    """Raised when a matrix is empty, non-square, or singular within tolerance."""
