"""Shared test doubles."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class QueueGenerator:
    """Bit generator that replays a fixed list of 64-bit words."""

    def __init__(self, words: Iterable[int]) -> None:
        self._words = deque(words)

    @property
    def remaining(self) -> int:
        return len(self._words)

    def next(self) -> int:
        return self._words.popleft()
