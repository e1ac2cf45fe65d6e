"""Heterogeneous applied-current tables (one value per neuron)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np

from burstnet.contracts.factories import Registry
from burstnet.contracts.tensor import Tensor
from burstnet.core.torch_utils import require_torch

DEFAULT_I0 = -10.0
DEFAULT_DELI = 15.0


def linear_applied_current(
    n: int,
    *,
    i0: float = DEFAULT_I0,
    deli: float = DEFAULT_DELI,
    descending: bool = False,
    device: Any = None,
    dtype: Any = None,
) -> Tensor:
    """Evenly spaced currents ``i0 + k * deli / (n - 1)`` for ``k = 0..n-1``."""
    if n <= 0:
        raise ValueError(f"n must be > 0, got {n}")
    torch = require_torch()
    dtype = dtype or torch.float64
    if n == 1:
        table = torch.full((1,), i0, device=device, dtype=dtype)
    else:
        k = torch.arange(n, device=device, dtype=dtype)
        table = i0 + k * deli / (n - 1)
    if descending:
        table = table.flip(0)
    return table


def shuffled_applied_current(
    n: int,
    *,
    seed: int | None = None,
    i0: float = DEFAULT_I0,
    deli: float = DEFAULT_DELI,
    device: Any = None,
    dtype: Any = None,
) -> Tensor:
    """The linear table in a seeded random order across neurons."""
    torch = require_torch()
    table = linear_applied_current(n, i0=i0, deli=deli, device=device, dtype=dtype)
    generator = torch.Generator(device="cpu")
    if seed is None:
        generator.seed()
    else:
        generator.manual_seed(int(seed))
    perm = torch.randperm(n, generator=generator).to(device=table.device)
    return table[perm]


def load_applied_current(
    path: str | Path,
    *,
    device: Any = None,
    dtype: Any = None,
) -> Tensor:
    """Read one current per line (whitespace separated values are also accepted)."""
    torch = require_torch()
    values = np.loadtxt(Path(path), dtype=np.float64, ndmin=1).reshape(-1)
    return torch.as_tensor(values, dtype=dtype or torch.float64, device=device)


APPLIED_CURRENT_TABLES = Registry[Tensor](label="applied_current_tables")
APPLIED_CURRENT_TABLES.register("linear", linear_applied_current)
APPLIED_CURRENT_TABLES.register("shuffled", shuffled_applied_current)
APPLIED_CURRENT_TABLES.register_alias("ramp", "linear")


def create_applied_current(key: str, n: int, **kwargs: Any) -> Tensor:
    return APPLIED_CURRENT_TABLES.create(key, n, **kwargs)


__all__ = [
    "APPLIED_CURRENT_TABLES",
    "create_applied_current",
    "linear_applied_current",
    "load_applied_current",
    "shuffled_applied_current",
]
