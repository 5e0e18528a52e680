"""Seed sources.

Everything random in this package flows from a single 64-bit seed.
:func:`time_seed` is the only place real non-determinism enters; every
other seed is either supplied by the caller or derived from one.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone

import numpy as np

# Seconds between the Unix epoch and 2001-01-01T00:00:00Z.
REFERENCE_DATE = datetime(2001, 1, 1, tzinfo=timezone.utc)
_REFERENCE_UNIX_OFFSET = REFERENCE_DATE.timestamp()


def time_seed(now: float | None = None) -> int:
    """Return a seed derived from the current time.

    The seed is the IEEE-754 bit pattern of the number of seconds since
    2001-01-01, so two calls a few microseconds apart still differ.
    """
    if now is None:
        now = time.time()
    interval = np.float64(now - _REFERENCE_UNIX_OFFSET)
    return int(interval.view(np.uint64))


def derive_seed(parent_seed: int, index: int) -> int:
    """Return the 64-bit seed of child ``index`` of ``parent_seed``.

    Children of one parent are independent of each other and of the
    parent, so concurrent tasks can each own a generator and the test
    still replays from the parent seed alone.
    """
    ss = np.random.SeedSequence(parent_seed).spawn(index + 1)
    return int(ss[-1].generate_state(1, dtype=np.uint64)[0])
