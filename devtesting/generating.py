"""RandomValueGenerator, the object tests hold to produce random values.

It owns one :class:`SeedableRandomNumberGenerator` and forwards every
``random_*`` call to the value generators in :mod:`devtesting.values`
and :mod:`devtesting.sampling`.  When an optional count or flag is left
unset, it is drawn first and then used, so the sequence of draws is part
of the observable behavior.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from devtesting.config.defaults import config_from_env
from devtesting.config.schema import RandomizationConfig
from devtesting.core.prng import SeedableRandomNumberGenerator
from devtesting.core.seeding import derive_seed, time_seed
from devtesting.core.types import Bounds, ClosedRange
from devtesting.runner.seed_logger import SeedLogger
from devtesting.sampling.numeric import random_integer, random_printable_float
from devtesting.values.dates import random_date
from devtesting.values.identifiers import random_uuid
from devtesting.values.primitives import (
    random_bool,
    random_bytes,
    random_case,
    random_element,
    random_optional,
)
from devtesting.values.strings import random_alphanumeric, random_basic_latin, random_string
from devtesting.values.urls import QueryItem, URLComponents, random_query_item, random_url, random_url_components

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

DEFAULT_DATA_COUNT = ClosedRange(16, 128)
DEFAULT_STRING_COUNT = ClosedRange(5, 10)


def make_random_number_generator(
    seed: int | None = None,
    *,
    seed_logger: SeedLogger | None = None,
) -> SeedableRandomNumberGenerator:
    """Log ``seed`` and return a generator seeded with it.

    A missing seed is derived from the current time; this is the only
    non-deterministic input in the package.
    """
    if seed is None:
        seed = time_seed()
    (seed_logger or SeedLogger()).log_seed(seed)
    return SeedableRandomNumberGenerator(seed)


class RandomValueGenerator:
    """Holds a seeded generator and produces random test values from it.

    Parameters
    ----------
    seed : int | None
        Seed for the generator.  Falls back to ``config.seed``, then to a
        time-derived seed.
    config : RandomizationConfig | None
        Defaults to :func:`config_from_env`.
    seed_logger : SeedLogger | None
        Defaults to one built from ``config``.
    """

    def __init__(
        self,
        seed: int | None = None,
        *,
        config: RandomizationConfig | None = None,
        seed_logger: SeedLogger | None = None,
    ) -> None:
        self._config = config if config is not None else config_from_env()
        self._seed_logger = seed_logger or SeedLogger.from_config(self._config)
        self.random_number_generator = make_random_number_generator(
            seed if seed is not None else self._config.seed,
            seed_logger=self._seed_logger,
        )

    @property
    def config(self) -> RandomizationConfig:
        return self._config

    @property
    def seed_logger(self) -> SeedLogger:
        return self._seed_logger

    @property
    def random_seed(self) -> int:
        return self.random_number_generator.seed

    @random_seed.setter
    def random_seed(self, seed: int) -> None:
        self._seed_logger.log_seed(seed)
        self.random_number_generator.seed = seed

    def spawn(self, index: int) -> RandomValueGenerator:
        """Return an independent generator whose seed is derived from this one's."""
        return RandomValueGenerator(
            derive_seed(self.random_seed, index),
            config=self._config,
            seed_logger=self._seed_logger,
        )

    def _count(self, count: int | None, default: ClosedRange) -> int:
        return count if count is not None else random_integer(default, self.random_number_generator)

    # ------------------------------------------------------------------
    # Booleans and selection
    # ------------------------------------------------------------------

    def random_bool(self) -> bool:
        return random_bool(self.random_number_generator)

    def random_case(self, enum_type: type[E]) -> E | None:
        return random_case(enum_type, self.random_number_generator)

    def random_element(self, collection: Iterable[T]) -> T | None:
        return random_element(collection, self.random_number_generator)

    def random_optional(self, value: Callable[[], T]) -> T | None:
        """Return ``value()`` half of the time; ``value`` is not called otherwise."""
        return random_optional(value, self.random_number_generator)

    # ------------------------------------------------------------------
    # Bytes
    # ------------------------------------------------------------------

    def random_data(self, count: int | None = None) -> bytes:
        """Random bytes; 16-128 of them when ``count`` is None."""
        return random_bytes(self._count(count, DEFAULT_DATA_COUNT), self.random_number_generator)

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def random_float(self, dtype: Any, bounds: Bounds) -> Any:
        """Printable float of type ``dtype`` within ``bounds``."""
        return random_printable_float(bounds, self.random_number_generator, dtype)

    def random_float64(self, bounds: Bounds) -> float:
        return random_printable_float(bounds, self.random_number_generator, float)

    def random_integer(self, dtype: Any, bounds: Bounds) -> Any:
        return random_integer(bounds, self.random_number_generator, dtype)

    def random_int(self, bounds: Bounds) -> int:
        return random_integer(bounds, self.random_number_generator, int)

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def random_alphanumeric_string(self, count: int | None = None) -> str:
        return random_alphanumeric(self._count(count, DEFAULT_STRING_COUNT), self.random_number_generator)

    def random_basic_latin_string(self, count: int | None = None) -> str:
        return random_basic_latin(self._count(count, DEFAULT_STRING_COUNT), self.random_number_generator)

    def random_string(self, characters: Sequence[str], count: int | None = None) -> str:
        return random_string(characters, self._count(count, DEFAULT_STRING_COUNT), self.random_number_generator)

    # ------------------------------------------------------------------
    # Identifiers, dates, URLs
    # ------------------------------------------------------------------

    def random_uuid(self) -> uuid.UUID:
        return random_uuid(self.random_number_generator)

    def random_date(self, bounds: Bounds[datetime]) -> datetime:
        return random_date(bounds, self.random_number_generator)

    def random_url(
        self,
        include_fragment: bool | None = None,
        include_query_items: bool | None = None,
    ) -> str:
        return random_url(self.random_number_generator, include_fragment, include_query_items)

    def random_url_components(
        self,
        include_fragment: bool | None = None,
        include_query_items: bool | None = None,
    ) -> URLComponents:
        return random_url_components(self.random_number_generator, include_fragment, include_query_items)

    def random_url_query_item(self) -> QueryItem:
        return random_query_item(self.random_number_generator)
