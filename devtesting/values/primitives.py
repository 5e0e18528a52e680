"""Booleans, element and case selection, optionals, and byte buffers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import TypeVar

from devtesting.core.types import HalfOpenRange, RandomNumberGenerator
from devtesting.sampling.numeric import random_integer

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_WORD_BYTES = 8


def random_bool(generator: RandomNumberGenerator) -> bool:
    """Unbiased coin flip."""
    return (generator.next() >> 17) & 1 == 0


def random_element(collection: Iterable[T], generator: RandomNumberGenerator) -> T | None:
    """Pick one element uniformly, or return None if ``collection`` is empty.

    Sequences are indexed directly.  Other iterables are read in iteration
    order first, so pass a sequence when the result must be reproducible
    across processes (set order depends on string hashing).
    """
    elements = collection if isinstance(collection, Sequence) else list(collection)
    if len(elements) == 0:
        return None
    return elements[random_integer(HalfOpenRange(0, len(elements)), generator)]


def random_case(enum_type: type[E], generator: RandomNumberGenerator) -> E | None:
    """Pick one member of ``enum_type`` uniformly, or None if it has no members."""
    return random_element(list(enum_type), generator)


def random_optional(value: Callable[[], T], generator: RandomNumberGenerator) -> T | None:
    """Return ``value()`` half of the time and None otherwise.

    ``value`` is only called when it is kept.
    """
    return value() if random_bool(generator) else None


def random_bytes(count: int, generator: RandomNumberGenerator) -> bytes:
    """Return ``count`` random bytes; empty when ``count <= 0``.

    Each draw contributes up to 8 bytes, least significant byte first.
    """
    if count <= 0:
        return b""

    buffer = bytearray()
    remaining = count
    while remaining > 0:
        take = min(remaining, _WORD_BYTES)
        buffer += generator.next().to_bytes(_WORD_BYTES, "little")[:take]
        remaining -= take
    return bytes(buffer)
