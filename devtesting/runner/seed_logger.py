"""Seed logger: reports every seed a generator uses so failures can be replayed.

Records go to a standard ``logging`` logger and, optionally, to a
``seeds.jsonl``-style file with one JSON object per line.  Logging never
affects the values a generator produces: write errors are reported as
warnings and otherwise ignored.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from devtesting.config.schema import RandomizationConfig

_PHASE_SUFFIXES = (" (setup)", " (call)", " (teardown)")


def current_test_id() -> str | None:
    """Return the id of the pytest test currently running, if any."""
    current = os.environ.get("PYTEST_CURRENT_TEST")
    if not current:
        return None
    for suffix in _PHASE_SUFFIXES:
        if current.endswith(suffix):
            return current[: -len(suffix)]
    return current


class SeedLogger:
    """Writes seed records to a logger and an optional JSONL file."""

    def __init__(
        self,
        log_path: str | Path | None = None,
        logger: logging.Logger | None = None,
        enabled: bool = True,
    ) -> None:
        self._log_path = Path(log_path) if log_path is not None else None
        self._logger = logger or logging.getLogger("devtesting.randomization")
        self._enabled = enabled

    @classmethod
    def from_config(cls, config: RandomizationConfig) -> SeedLogger:
        return cls(
            log_path=config.seed_log_path,
            logger=logging.getLogger(config.logger_name),
            enabled=config.log_seeds,
        )

    @property
    def log_path(self) -> Path | None:
        return self._log_path

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log_seed(self, seed: int, test_id: str | None = None) -> None:
        """Record ``seed``, prefixed with the running test's id when known."""
        if not self._enabled:
            return
        if test_id is None:
            test_id = current_test_id()

        prefix = f"{test_id}: " if test_id else ""
        self._logger.info("%sUsing random seed %d", prefix, seed)

        if self._log_path is not None:
            self._append_record({
                "logged_at": datetime.now(timezone.utc).isoformat(),
                "seed": seed,
                "test_id": test_id,
            })

    def _append_record(self, record: dict[str, object]) -> None:
        try:
            self._log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._log_path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(record) + "\n")
        except OSError as exc:
            self._logger.warning("Could not write seed record to %s: %s", self._log_path, exc)
