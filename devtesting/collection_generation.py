"""Build lists and dicts from a count and a factory."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Hashable, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def generate_list(count: int, factory: Callable[..., T], *, indexed: bool = False) -> list[T]:
    """Return ``[factory() for _ in range(count)]``.

    With ``indexed=True`` the factory receives the element index.  Calls
    happen in index order, which matters when the factory draws random
    values.
    """
    if indexed:
        return [factory(i) for i in range(count)]
    return [factory() for _ in range(count)]


def generate_dict(count: int, factory: Callable[[], tuple[K, V]]) -> dict[K, V]:
    """Call ``factory`` ``count`` times and collect the ``(key, value)`` pairs.

    A repeated key replaces the earlier value, so the result can hold
    fewer than ``count`` entries.
    """
    result: dict[Any, Any] = {}
    for _ in range(count):
        key, value = factory()
        result[key] = value
    return result
