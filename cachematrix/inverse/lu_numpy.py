import numpy as np

from .errors import InvertibilityError


def as_square(A):
    """Return A as a finite, non-empty, square float64 array."""
    try:
        A = np.array(A, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvertibilityError(f"Matrix must be a numeric 2-d array: {e}") from e
    if A.ndim != 2 or A.shape[0] != A.shape[1] or A.shape[0] == 0:
        raise InvertibilityError(f"Matrix must be square and non-empty, got shape {A.shape}")
    if not np.isfinite(A).all():
        raise InvertibilityError("Matrix contains NaN or Inf")
    return A


def lu_decomposition(A, tol=1e-12):
    A = as_square(A)
    n = A.shape[0]
    L = np.eye(n)
    U = A.copy()
    P = np.eye(n)

    # Pivots are compared against the scale of A, not an absolute cutoff
    threshold = tol * n * np.max(np.abs(A))
    for i in range(n):
        # Pivot selection
        max_row = np.argmax(np.abs(U[i:, i])) + i
        if not abs(U[max_row, i]) > threshold:
            raise InvertibilityError("Singular matrix")

        # Swap rows in U
        U[[i, max_row]] = U[[max_row, i]]
        P[[i, max_row]] = P[[max_row, i]]

        # Swap rows in L (only left part)
        if i > 0:
            L[[i, max_row], :i] = L[[max_row, i], :i]

        # Elimination (vectorized over the remaining rows)
        factors = U[i+1:, i] / U[i, i]
        L[i+1:, i] = factors
        U[i+1:, i:] -= np.outer(factors, U[i, i:])
    return P, L, U


def invert_matrix(A, tol=1e-12):
    P, L, U = lu_decomposition(A, tol)

    # Solve PA = LU -> A^-1 = U^-1 L^-1 P
    Y = np.linalg.solve(L, P)
    X = np.linalg.solve(U, Y)

    return X


def invert_builtin(A, tol=np.finfo(np.float64).eps):
    """np.linalg.inv guarded by a reciprocal condition number check."""
    A = as_square(A)
    try:
        with np.errstate(all="ignore"):
            A_inv = np.linalg.inv(A)
    except np.linalg.LinAlgError as e:
        raise InvertibilityError(str(e)) from e

    # rcond = 1 / (||A||_1 * ||A^-1||_1), reusing the inverse just computed
    with np.errstate(all="ignore"):
        rcond = 1.0 / (np.linalg.norm(A, 1) * np.linalg.norm(A_inv, 1))
    if not np.isfinite(rcond) or rcond < tol:
        raise InvertibilityError(f"Matrix is singular to tolerance (rcond={rcond:.3e}, tol={tol:.3e})")
    return A_inv
