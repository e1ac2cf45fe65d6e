"""Factory/registry contracts.

Lightweight named registries so table generators and other pluggable pieces
can be added or swapped without changing callers.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class IRegistry(Protocol[T]):
    """Named registry mapping string keys to constructors."""

    def register(self, key: str, ctor: Callable[..., T]) -> None:
        ...

    def create(self, key: str, *args: Any, **kwargs: Any) -> T:
        ...

    def keys(self) -> list[str]:
        ...


class Registry(IRegistry[T]):
    """Simple named registry with optional aliasing."""

    def __init__(self, *, label: str | None = None) -> None:
        self._label = label or "registry"
        self._ctors: dict[str, Callable[..., T]] = {}
        self._aliases: dict[str, str] = {}

    def register(self, key: str, ctor: Callable[..., T]) -> None:
        if key in self._ctors or key in self._aliases:
            raise KeyError(f"{self._label} already has key '{key}'.")
        self._ctors[key] = ctor

    def register_alias(self, alias: str, target: str) -> None:
        if alias in self._ctors or alias in self._aliases:
            raise KeyError(f"{self._label} already has key '{alias}'.")
        if target not in self._ctors:
            raise KeyError(f"{self._label} has no target '{target}' for alias '{alias}'.")
        self._aliases[alias] = target

    def create(self, key: str, *args: Any, **kwargs: Any) -> T:
        resolved = self._aliases.get(key, key)
        if resolved not in self._ctors:
            raise KeyError(f"{self._label} has no key '{key}'.")
        return self._ctors[resolved](*args, **kwargs)

    def keys(self) -> list[str]:
        return sorted(set(self._ctors) | set(self._aliases))


__all__ = ["IRegistry", "Registry"]
