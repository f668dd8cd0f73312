import logging
from typing import Tuple

import numpy as np
import torch

from .errors import InvertibilityError
from .lu_numpy import as_square

logger = logging.getLogger(__name__)


class LUPyTorch:
    """
    Matrix inversion using PyTorch's (optionally GPU-accelerated) LU routines.

    Results are always copied back to a float64 numpy array, so callers that
    cache them never hold device memory.
    """

    def __init__(self, device: str = 'cpu'):
        """
        Args:
            device: 'cuda' for GPU, 'cpu' otherwise
        """
        self.device = torch.device(device if device != 'cuda' or torch.cuda.is_available() else 'cpu')
        if device == 'cuda' and not torch.cuda.is_available():
            logger.warning("CUDA not available, falling back to CPU")

    def to_tensor(self, A) -> torch.Tensor:
        return torch.as_tensor(as_square(A), device=self.device)

    def lu_decomposition(self, A: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        """
        Compute LU decomposition with partial pivoting: PA = LU

        Uses torch.linalg.lu_factor_ex, which does not raise on exactly
        singular input; singularity is judged from the diagonal of U instead.

        Args:
            A: Input matrix [n, n] on self.device

        Returns:
            L: Lower triangular with ones on diagonal [n, n]
            U: Upper triangular [n, n]
            P: Permutation matrix [n, n]
        """
        LU, pivots, _ = torch.linalg.lu_factor_ex(A)

        # Extract L and U from compact representation
        n = A.shape[0]
        L = torch.tril(LU, diagonal=-1) + torch.eye(n, dtype=A.dtype, device=self.device)
        U = torch.triu(LU)

        # Convert 1-based LAPACK pivot indices to a permutation matrix
        P = torch.eye(n, dtype=A.dtype, device=self.device)
        for i, pivot in enumerate((pivots - 1).tolist()):
            if i != pivot:
                P[[i, pivot]] = P[[pivot, i]]

        return L, U, P

    def invert_triangular(self, T: torch.Tensor, lower: bool = True) -> torch.Tensor:
        """Invert a triangular matrix with a triangular solve against I."""
        n = T.shape[0]
        I = torch.eye(n, dtype=T.dtype, device=self.device)
        return torch.linalg.solve_triangular(T, I, upper=not lower)

    def invert_via_lu(self, A: torch.Tensor, tol: float = 1e-12) -> torch.Tensor:
        """
        Invert matrix using LU decomposition: A^(-1) = U^(-1) @ L^(-1) @ P

        Raises:
            InvertibilityError: if any pivot of U is within tol * n * max|A_ij| of zero
        """
        L, U, P = self.lu_decomposition(A)
        threshold = tol * A.shape[0] * torch.max(torch.abs(A)).item()
        if not torch.min(torch.abs(torch.diagonal(U))).item() > threshold:
            raise InvertibilityError("Singular matrix")

        L_inv = self.invert_triangular(L, lower=True)
        U_inv = self.invert_triangular(U, lower=False)

        return U_inv @ L_inv @ P

    def invert(self, A, tol: float = 1e-12) -> np.ndarray:
        A_inv = self.invert_via_lu(self.to_tensor(A), tol=tol)
        return A_inv.cpu().numpy()


def invert_matrix(A, tol=1e-12, device='cpu'):
    return LUPyTorch(device=device).invert(A, tol=tol)
