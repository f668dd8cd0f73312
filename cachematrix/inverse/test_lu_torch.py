import numpy as np
import pytest

torch = pytest.importorskip("torch")

from cachematrix.inverse import InvertibilityError, solve
from cachematrix.inverse.lu_torch import LUPyTorch


def test_lu_decomposition_reconstructs():
    A_np = np.array([
        [4.0, 3.0, 2.0],
        [3.0, 2.0, 1.0],
        [2.0, 1.0, 3.0]
    ])
    lu = LUPyTorch(device='cpu')
    A = lu.to_tensor(A_np)

    L, U, P = lu.lu_decomposition(A)

    assert torch.norm(L @ U - P @ A).item() < 1e-10


def test_invert_matches_builtin():
    np.random.seed(42)
    A_np = np.random.randn(6, 6) + np.eye(6) * 6
    lu = LUPyTorch(device='cpu')

    A_inv = lu.invert(A_np)

    assert isinstance(A_inv, np.ndarray)
    np.testing.assert_allclose(A_inv, torch.linalg.inv(torch.from_numpy(A_np)).numpy(), atol=1e-10)
    np.testing.assert_allclose(A_np @ A_inv, np.eye(6), atol=1e-10)


def test_singular_and_non_square():
    lu = LUPyTorch(device='cpu')
    with pytest.raises(InvertibilityError):
        lu.invert([[1.0, 2.0], [2.0, 4.0]])
    with pytest.raises(InvertibilityError):
        lu.invert(np.ones((2, 3)))
    with pytest.raises(InvertibilityError):
        lu.invert([[np.nan, 1.0], [1.0, 1.0]])


@pytest.mark.parametrize("scale", [1e-20, 1e10])
def test_pivot_threshold_scales_with_matrix(scale):
    lu = LUPyTorch(device='cpu')

    np.testing.assert_allclose(lu.invert(scale * np.eye(2)), np.eye(2) / scale, rtol=1e-12)
    with pytest.raises(InvertibilityError):
        lu.invert(scale * np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]]))


def test_solve_backend(monkeypatch):
    monkeypatch.setenv("CACHEMATRIX_TORCH_DEVICE", "cpu")
    np.testing.assert_allclose(solve([[2, 0], [0, 2]], backend="torch"), [[0.5, 0], [0, 0.5]])


def test_cuda_fallback_warns(monkeypatch, caplog):
    monkeypatch.setattr(torch.cuda, "is_available", lambda: False)

    lu = LUPyTorch(device='cuda')

    assert lu.device.type == 'cpu'
    assert "falling back to CPU" in caplog.text


def test_device_option_through_resolve(monkeypatch):
    from cachematrix.cache_cell import make_cache_cell
    from cachematrix.resolve import resolve_inverse

    # An unusable configured device proves the explicit option wins
    monkeypatch.setenv("CACHEMATRIX_TORCH_DEVICE", "not-a-device")
    cell = make_cache_cell([[4.0, 7.0], [2.0, 6.0]])

    M_inv = resolve_inverse(cell, backend="torch", device="cpu")

    np.testing.assert_allclose(M_inv, [[0.6, -0.7], [-0.2, 0.4]], atol=1e-12)
