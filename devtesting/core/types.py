"""Framework-level types used across all random value generators.

These are the shared vocabulary of the package: 64-bit word constants,
range bounds, and the protocol every bit generator satisfies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, Union


# ---------------------------------------------------------------------------
# 64-bit words
# ---------------------------------------------------------------------------

UINT64_MASK = (1 << 64) - 1
UINT64_MAX = UINT64_MASK


class RandomNumberGenerator(Protocol):
    """Anything that produces uniformly distributed 64-bit words."""

    def next(self) -> int:
        """Return the next 64 random bits as a non-negative int."""
        ...


# ---------------------------------------------------------------------------
# Range bounds
# ---------------------------------------------------------------------------

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class HalfOpenRange(Generic[T]):
    """Values ``v`` with ``lower <= v < upper``."""

    lower: T
    upper: T

    @property
    def is_empty(self) -> bool:
        return not self.lower < self.upper

    def contains(self, value: Any) -> bool:
        return self.lower <= value < self.upper


@dataclass(frozen=True, slots=True)
class ClosedRange(Generic[T]):
    """Values ``v`` with ``lower <= v <= upper``."""

    lower: T
    upper: T

    @property
    def is_empty(self) -> bool:
        return not self.lower <= self.upper

    def contains(self, value: Any) -> bool:
        return self.lower <= value <= self.upper


Bounds = Union[HalfOpenRange[T], ClosedRange[T]]
