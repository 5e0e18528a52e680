"""Random dates within a range."""

from __future__ import annotations

from datetime import datetime, timedelta

from devtesting.core.seeding import REFERENCE_DATE
from devtesting.core.types import Bounds, ClosedRange, RandomNumberGenerator
from devtesting.sampling.numeric import random_printable_float

_NAIVE_REFERENCE_DATE = REFERENCE_DATE.replace(tzinfo=None)
_RESOLUTION = timedelta(microseconds=1)


def _reference_for(moment: datetime) -> datetime:
    return _NAIVE_REFERENCE_DATE if moment.tzinfo is None else REFERENCE_DATE


def random_date(bounds: Bounds[datetime], generator: RandomNumberGenerator) -> datetime:
    """Return a datetime within ``bounds``.

    The bounds are mapped to seconds since 2001-01-01 and a printable
    offset is drawn in between, so the result is usually a whole second
    plus a multiple of 1/256 s before rounding to microseconds.  Naive
    and aware bounds may not be mixed.
    """
    reference = _reference_for(bounds.lower)
    lower = (bounds.lower - reference).total_seconds()
    upper = (bounds.upper - reference).total_seconds()

    offset = random_printable_float(type(bounds)(lower, upper), generator)
    moment = reference + timedelta(seconds=offset)

    # Microsecond rounding can land on or past an excluded upper bound.
    last = bounds.upper if isinstance(bounds, ClosedRange) else bounds.upper - _RESOLUTION
    return min(max(moment, bounds.lower), last)
