"""Default randomization configuration and environment overrides.

Environment variables:
  - DEVTESTING_RANDOM_SEED  fixed seed (decimal or 0x hex)
  - DEVTESTING_LOG_SEEDS    "0"/"false" disables seed logging
  - DEVTESTING_SEED_LOG     path of a JSONL seed log
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from devtesting.config.schema import RandomizationConfig

SEED_ENV = "DEVTESTING_RANDOM_SEED"
LOG_SEEDS_ENV = "DEVTESTING_LOG_SEEDS"
SEED_LOG_ENV = "DEVTESTING_SEED_LOG"


def default_config() -> RandomizationConfig:
    """Return the baseline config: time-derived seeds, logged, no seed file."""
    return RandomizationConfig()


def config_from_env(environ: Mapping[str, str] | None = None) -> RandomizationConfig:
    """Overlay environment overrides onto :func:`default_config`.

    Raises pydantic.ValidationError for malformed values.
    """
    env = os.environ if environ is None else environ
    overrides: dict[str, object] = {}
    if SEED_ENV in env:
        overrides["seed"] = env[SEED_ENV]
    if LOG_SEEDS_ENV in env:
        overrides["log_seeds"] = env[LOG_SEEDS_ENV]
    if env.get(SEED_LOG_ENV):
        overrides["seed_log_path"] = env[SEED_LOG_ENV]
    return RandomizationConfig.model_validate({**default_config().model_dump(), **overrides})
