"""Uniform integers and floats within caller-supplied bounds.

All samplers pull raw 64-bit words from a :class:`RandomNumberGenerator`
and are fully determined by the generator's state.  Integer and float
widths follow NumPy's fixed-width scalar types; the plain Python ``int``
and ``float`` types are treated as signed 64-bit and binary64.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from devtesting.core.types import Bounds, ClosedRange, RandomNumberGenerator

PRINTABLE_SUBDIVISIONS = 256


# ---------------------------------------------------------------------------
# Raw bounded draws
# ---------------------------------------------------------------------------

def next_below(generator: RandomNumberGenerator, upper_bound: int, bits: int = 64) -> int:
    """Return an unbiased value in ``[0, upper_bound)``.

    Uses multiply-high rejection on the low ``bits`` bits of each draw.
    ``upper_bound`` must be in ``[1, 2**bits]``.
    """
    if not 0 < upper_bound <= 1 << bits:
        raise ValueError(f"upper_bound must be in [1, 2**{bits}], got {upper_bound}")
    mask = (1 << bits) - 1

    product = (generator.next() & mask) * upper_bound
    low = product & mask
    if low < upper_bound:
        threshold = ((1 << bits) - upper_bound) % upper_bound
        while low < threshold:
            product = (generator.next() & mask) * upper_bound
            low = product & mask
    return product >> bits


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

def _integer_info(dtype: Any) -> np.iinfo:
    if dtype is int:
        return np.iinfo(np.int64)
    return np.iinfo(dtype)


def random_integer(
    bounds: Bounds,
    generator: RandomNumberGenerator,
    dtype: Any = int,
) -> Any:
    """Return a uniformly distributed integer within ``bounds``.

    ``dtype`` is ``int`` (signed 64-bit, returns ``int``) or a NumPy
    integer type such as ``np.uint8`` (returns that scalar type).

    Raises ValueError if ``bounds`` is empty or does not fit ``dtype``.
    """
    info = _integer_info(dtype)
    lower, upper = int(bounds.lower), int(bounds.upper)
    if bounds.is_empty:
        raise ValueError(f"Can't get random value with an empty range {bounds}")
    if lower < info.min or upper > info.max:
        raise ValueError(f"{bounds} does not fit in {info.dtype}")

    delta = upper - lower
    if isinstance(bounds, ClosedRange):
        if delta == (1 << info.bits) - 1:
            raw = generator.next() & delta
            value = raw - (1 << info.bits) if info.min < 0 and raw > info.max else raw
            return _as_integer(value, dtype)
        delta += 1

    return _as_integer(lower + next_below(generator, delta, info.bits), dtype)


def _as_integer(value: int, dtype: Any) -> Any:
    return value if dtype is int else dtype(value)


# ---------------------------------------------------------------------------
# Floats
# ---------------------------------------------------------------------------

def _float_type(dtype: Any) -> type[np.floating]:
    ftype = np.dtype(dtype).type
    if ftype not in (np.float16, np.float32, np.float64):
        raise ValueError(f"unsupported floating-point type {dtype!r}")
    return ftype


def _typed_bounds(bounds: Bounds, ftype: type[np.floating]) -> Bounds:
    with np.errstate(over="ignore"):
        return type(bounds)(ftype(bounds.lower), ftype(bounds.upper))


def _raw_float(bounds: Bounds, generator: RandomNumberGenerator, ftype: type[np.floating]) -> np.floating:
    info = np.finfo(ftype)
    if bounds.is_empty:
        raise ValueError(f"Can't get random value with an empty range {bounds}")
    lower, upper = bounds.lower, bounds.upper
    with np.errstate(over="ignore"):
        delta = upper - lower
    if not np.isfinite(delta):
        raise ValueError(f"There is no uniform distribution on an infinite range {bounds}")

    max_significand = 1 << (info.nmant + 1)
    half_ulp = info.eps / ftype(2)

    if isinstance(bounds, ClosedRange):
        raw = next_below(generator, max_significand + 1, info.bits)
        if raw == max_significand:
            return upper
        return delta * (ftype(raw) * half_ulp) + lower

    while True:
        raw = next_below(generator, max_significand, info.bits)
        value = delta * (ftype(raw) * half_ulp) + lower
        if value != upper:
            return value


def _as_float(value: np.floating, dtype: Any) -> Any:
    return float(value) if dtype is float else value


def random_float(
    bounds: Bounds,
    generator: RandomNumberGenerator,
    dtype: Any = float,
) -> Any:
    """Return a uniformly distributed float within ``bounds``.

    Bounds are first converted to ``dtype``; arithmetic happens in that
    type.  Raises ValueError if the bounds are empty or their width is
    not finite.
    """
    ftype = _float_type(dtype)
    return _as_float(_raw_float(_typed_bounds(bounds, ftype), generator, ftype), dtype)


def random_printable_float(
    bounds: Bounds,
    generator: RandomNumberGenerator,
    dtype: Any = float,
) -> Any:
    """Return a float within ``bounds`` that almost always prints exactly in decimal.

    The value is an integer plus a multiple of 1/256, which survives a
    decimal round trip (JSON, YAML, ``repr``).  When ``bounds`` is too
    narrow for such a value, the plain uniform draw is returned instead;
    it is still within ``bounds`` but may not round-trip.
    """
    ftype = _float_type(dtype)
    typed = _typed_bounds(bounds, ftype)
    value = _raw_float(typed, generator, ftype)
    integer = np.trunc(value)
    step = next_below(generator, PRINTABLE_SUBDIVISIONS)
    candidate = integer + ftype(step) / ftype(PRINTABLE_SUBDIVISIONS)
    return _as_float(candidate if typed.contains(candidate) else value, dtype)
