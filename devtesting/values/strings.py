"""Random strings drawn from a character source."""

from __future__ import annotations

import string
from collections.abc import Sequence

from devtesting.core.types import RandomNumberGenerator
from devtesting.values.primitives import random_element

# Digits, then upper-case, then lower-case ASCII letters.
ALPHANUMERIC_CHARACTERS = string.digits + string.ascii_uppercase + string.ascii_lowercase

# Every printable ASCII character, U+0020 through U+007E.
BASIC_LATIN_CHARACTERS = "".join(chr(code) for code in range(0x20, 0x7F))


def random_string(
    characters: Sequence[str],
    count: int,
    generator: RandomNumberGenerator,
) -> str:
    """Return ``count`` characters picked uniformly, with replacement, from ``characters``.

    ``characters`` is a string or a sequence of strings; use a sequence to
    treat multi-code-point graphemes (emoji with modifiers, flags) as
    single characters.  Returns "" when ``count <= 0``.

    Raises ValueError if ``characters`` is empty and ``count`` is positive.
    """
    if len(characters) == 0 and count > 0:
        raise ValueError("count must be 0 if characters is empty")
    if count <= 0:
        return ""
    return "".join(random_element(characters, generator) for _ in range(count))


def random_alphanumeric(count: int, generator: RandomNumberGenerator) -> str:
    return random_string(ALPHANUMERIC_CHARACTERS, count, generator)


def random_basic_latin(count: int, generator: RandomNumberGenerator) -> str:
    return random_string(BASIC_LATIN_CHARACTERS, count, generator)
