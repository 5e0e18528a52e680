"""Configuration schema for random value generation.

Pydantic model describing how generators pick their default seed and
where seeds are reported.  Environment overrides are applied in
:mod:`devtesting.config.defaults`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from devtesting.core.types import UINT64_MAX


class RandomizationConfig(BaseModel):
    """How generators are seeded and how their seeds are logged."""

    seed: int | None = Field(
        default=None,
        ge=0, le=UINT64_MAX,
        description=(
            "Seed used when a generator is built without one. "
            "None derives a seed from the current time."
        ),
    )
    log_seeds: bool = Field(
        default=True,
        description="Log the seed whenever a generator is created or reseeded.",
    )
    seed_log_path: Path | None = Field(
        default=None,
        description="Optional JSONL file that seed records are appended to.",
    )
    logger_name: str = Field(
        default="devtesting.randomization",
        min_length=1,
        description="Name of the logging.Logger that receives seed records.",
    )

    @field_validator("seed", mode="before")
    @classmethod
    def parse_seed_string(cls, value: Any) -> Any:
        # Accept "0x..." as well as decimal so logged seeds can be pasted back.
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            try:
                return int(text, 0)
            except ValueError as exc:
                raise ValueError(f"seed must be a decimal or 0x-prefixed integer, got {value!r}") from exc
        return value
