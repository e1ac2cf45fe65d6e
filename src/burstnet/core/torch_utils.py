"""Torch utilities shared across the codebase."""

from __future__ import annotations

import importlib
from typing import Any

from burstnet.contracts.errors import ConfigurationError
from burstnet.contracts.neurons import StepContext


def require_torch() -> Any:
    try:
        return importlib.import_module("torch")
    except Exception as exc:  # pragma: no cover - import guard
        raise RuntimeError("Torch is required to run the BurstNet simulation kernel.") from exc


def resolve_device_dtype(ctx: StepContext | None) -> tuple[Any, Any]:
    """Resolve ``ctx`` to a torch device and a floating dtype.

    Raises :class:`ConfigurationError` for unknown or unavailable devices and
    for dtype names that are not floating point torch dtypes.
    """
    t = require_torch()
    device = _resolve_device(t, ctx.device) if ctx and ctx.device else t.device("cpu")
    dtype = _resolve_dtype(t, ctx.dtype) if ctx and ctx.dtype else t.get_default_dtype()
    return device, dtype


def as_tensor_1d(values: Any, *, device: Any, dtype: Any, name: str = "values") -> Any:
    """Copy ``values`` into a fresh 1-D tensor on ``device``/``dtype``."""
    t = require_torch()
    if isinstance(values, t.Tensor):
        out = values.detach().to(device=device, dtype=dtype).clone()
    else:
        out = t.tensor(list(values), device=device, dtype=dtype)
    if out.dim() != 1:
        raise ValueError(f"{name} must be 1-D, got shape {tuple(out.shape)}")
    return out


def _resolve_device(t: Any, device_str: str) -> Any:
    try:
        device = t.device(device_str)
    except (RuntimeError, TypeError) as exc:
        raise ConfigurationError(f"Unknown torch device: {device_str}") from exc
    if device.type == "cuda" and not t.cuda.is_available():
        raise ConfigurationError(f"Device {device_str} requested but CUDA is not available")
    return device


def _resolve_dtype(t: Any, dtype_str: str | None) -> Any:
    if dtype_str is None:
        return t.get_default_dtype()
    name = dtype_str
    if name.startswith("torch."):
        name = name.split(".", 1)[1]
    dtype = getattr(t, name, None)
    if not isinstance(dtype, t.dtype):
        raise ConfigurationError(f"Unknown torch dtype: {dtype_str}")
    if not dtype.is_floating_point:
        raise ConfigurationError(f"dtype must be a floating point type, got {dtype_str}")
    return dtype


__all__ = ["as_tensor_1d", "require_torch", "resolve_device_dtype"]
