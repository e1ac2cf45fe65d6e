"""Pytest configuration."""

from __future__ import annotations

import os
import tempfile
import uuid
from pathlib import Path

import pytest


def _pytest_base_dir() -> Path:
    root = os.environ.get("PYTEST_BASEDIR")
    repo_root = Path(__file__).resolve().parents[1]
    base = Path(root) if root else repo_root / ".pytest_tmp"
    return _ensure_writable_base(base, fallback=Path(tempfile.gettempdir()) / "burstnet_pytest")


def _ensure_writable_base(base: Path, *, fallback: Path) -> Path:
    try:
        base.mkdir(parents=True, exist_ok=True)
        probe = base / "__write_probe__"
        probe.mkdir(parents=True, exist_ok=True)
        probe.rmdir()
        return base
    except OSError:
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


@pytest.fixture
def artifact_dir() -> Path:
    run_dir = _pytest_base_dir() / "artifacts" / uuid.uuid4().hex
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir
