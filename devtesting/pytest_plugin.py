"""pytest integration: a ``--random-seed`` option and a generator fixture.

Enable it from a top-level conftest::

    pytest_plugins = ["devtesting.pytest_plugin"]
"""

from __future__ import annotations

import pytest

from devtesting.generating import RandomValueGenerator


def _seed_option(value: str) -> int:
    return int(value, 0)


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("devtesting")
    group.addoption(
        "--random-seed",
        action="store",
        type=_seed_option,
        default=None,
        help="Seed every random_value_generator fixture with this value (decimal or 0x hex).",
    )


@pytest.fixture
def random_value_generator(request: pytest.FixtureRequest) -> RandomValueGenerator:
    """A fresh generator per test; its seed is logged with the test id."""
    return RandomValueGenerator(seed=request.config.getoption("random_seed"))
