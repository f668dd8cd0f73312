import pytest

from cachematrix.config import DEFAULT_TOL, InverseConfig, load_config


def test_defaults_without_file():
    cfg = load_config()

    assert isinstance(cfg, InverseConfig)
    assert cfg.backend == "numpy"
    assert cfg.tol == DEFAULT_TOL
    assert cfg.torch_device == "cpu"


def test_load_yaml(tmp_path):
    path = tmp_path / "cachematrix.yml"
    path.write_text("backend: lu\ntol: 1.0e-10\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.backend == "lu"
    assert cfg.tol == 1e-10
    assert cfg.torch_device == "cpu"


def test_empty_yaml(tmp_path):
    path = tmp_path / "cachematrix.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(path).backend == "numpy"


def test_env_overrides(monkeypatch, tmp_path):
    source = tmp_path / "cachematrix.yml"
    source.write_text("backend: lu\ntol: 1.0e-10\n", encoding="utf-8")

    monkeypatch.setenv("CACHEMATRIX_BACKEND", "gauss_jordan")
    monkeypatch.setenv("CACHEMATRIX_TOL", "1e-8")
    monkeypatch.setenv("CACHEMATRIX_TORCH_DEVICE", "cuda")

    cfg = load_config(source)

    assert cfg.backend == "gauss_jordan"
    assert cfg.tol == 1e-8
    assert cfg.torch_device == "cuda"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


def test_invalid_values(monkeypatch):
    monkeypatch.setenv("CACHEMATRIX_BACKEND", "cholesky")
    with pytest.raises(ValueError, match="Unknown backend"):
        load_config()

    monkeypatch.setenv("CACHEMATRIX_BACKEND", "numpy")
    monkeypatch.setenv("CACHEMATRIX_TOL", "0")
    with pytest.raises(ValueError, match="tol must be positive"):
        load_config()
