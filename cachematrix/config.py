"""Configuration loader for the inversion backends."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import yaml

BACKEND_NAMES = ("numpy", "lu_numpy", "lu", "gauss_jordan", "torch")
DEFAULT_TOL = float(np.finfo(np.float64).eps)


@dataclass(frozen=True)
class InverseConfig:
    backend: str
    tol: float
    torch_device: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InverseConfig":
        cfg = cls(
            backend=str(data.get("backend", "numpy")),
            tol=float(data.get("tol", DEFAULT_TOL)),
            torch_device=str(data.get("torch_device", "cpu")),
        )
        cfg.validate()
        return cfg

    def validate(self) -> None:
        if self.backend not in BACKEND_NAMES:
            raise ValueError(f"Unknown backend {self.backend!r}, expected one of {BACKEND_NAMES}")
        if not self.tol > 0:
            raise ValueError(f"tol must be positive, got {self.tol}")


ENV_MAP = {
    "backend": "CACHEMATRIX_BACKEND",
    "tol": "CACHEMATRIX_TOL",
    "torch_device": "CACHEMATRIX_TORCH_DEVICE",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        value: Any = os.environ[env_name]
        if key == "tol":
            value = float(value)
        merged[key] = value

    return merged


def load_config(config_path: Optional[str | Path] = None) -> InverseConfig:
    data: Dict[str, Any] = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        data = load_yaml(path)

    data = merge_env_overrides(data)
    return InverseConfig.from_dict(data)
