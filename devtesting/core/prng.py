"""Seedable pseudo-random number generation (xoroshiro128++ seeded by splitmix64).

The output sequence is a pure function of the 64-bit seed, so a seed
recorded from a failing test reproduces the failing values exactly.
Not suitable for anything security-sensitive.
"""

from __future__ import annotations

from devtesting.core.types import UINT64_MASK


def rotate_left(value: int, bits: int) -> int:
    """Rotate a 64-bit word left by ``bits``."""
    return ((value << bits) | (value >> (64 - bits))) & UINT64_MASK


class SplitMix64:
    """Seed expander: one 64-bit word in, a stream of well-mixed words out."""

    _INCREMENT = 0x9E37_79B9_7F4A_7C15
    _MULTIPLIER_1 = 0xBF58_476D_1CE4_E5B9
    _MULTIPLIER_2 = 0x94D0_49BB_1331_11EB

    __slots__ = ("_state",)

    def __init__(self, state: int) -> None:
        self._state = state & UINT64_MASK

    def next(self) -> int:
        self._state = (self._state + self._INCREMENT) & UINT64_MASK
        z = self._state
        z = ((z ^ (z >> 30)) * self._MULTIPLIER_1) & UINT64_MASK
        z = ((z ^ (z >> 27)) * self._MULTIPLIER_2) & UINT64_MASK
        return z ^ (z >> 31)


class SeedableRandomNumberGenerator:
    """xoroshiro128++ with a readable, resettable seed.

    Parameters
    ----------
    seed : int
        Unsigned 64-bit seed.  Assigning :attr:`seed` later discards the
        current state and re-derives it exactly as construction does.

    Instances are not synchronized.  Give each thread its own generator;
    :meth:`copy` produces an independent generator with identical state.
    """

    __slots__ = ("_seed", "_state0", "_state1")

    def __init__(self, seed: int) -> None:
        self._seed = 0
        self._state0 = 0
        self._state1 = 0
        self.seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    @seed.setter
    def seed(self, value: int) -> None:
        if not 0 <= value <= UINT64_MASK:
            raise ValueError(f"seed must be an unsigned 64-bit integer, got {value}")
        splitmix = SplitMix64(value)
        self._seed = value
        self._state0 = splitmix.next()
        self._state1 = splitmix.next()

    @property
    def state(self) -> tuple[int, int]:
        return self._state0, self._state1

    def next(self) -> int:
        s0 = self._state0
        s1 = self._state1
        result = (rotate_left((s0 + s1) & UINT64_MASK, 17) + s0) & UINT64_MASK

        s1 ^= s0
        self._state0 = rotate_left(s0, 49) ^ s1 ^ ((s1 << 21) & UINT64_MASK)
        self._state1 = rotate_left(s1, 28)

        return result

    def copy(self) -> SeedableRandomNumberGenerator:
        clone = SeedableRandomNumberGenerator.__new__(SeedableRandomNumberGenerator)
        clone._seed = self._seed
        clone._state0 = self._state0
        clone._state1 = self._state1
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> SeedableRandomNumberGenerator:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeedableRandomNumberGenerator):
            return NotImplemented
        return self._seed == other._seed and self.state == other.state

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"SeedableRandomNumberGenerator(seed={self._seed})"
