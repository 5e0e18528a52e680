"""Composite random values built on the numeric samplers."""

from __future__ import annotations

from devtesting.values.dates import random_date
from devtesting.values.identifiers import random_uuid
from devtesting.values.primitives import random_bool, random_bytes, random_case, random_element, random_optional
from devtesting.values.strings import (
    ALPHANUMERIC_CHARACTERS,
    BASIC_LATIN_CHARACTERS,
    random_alphanumeric,
    random_basic_latin,
    random_string,
)
from devtesting.values.urls import QueryItem, URLComponents, random_query_item, random_url, random_url_components

__all__ = [
    "ALPHANUMERIC_CHARACTERS",
    "BASIC_LATIN_CHARACTERS",
    "QueryItem",
    "URLComponents",
    "random_alphanumeric",
    "random_basic_latin",
    "random_bool",
    "random_bytes",
    "random_case",
    "random_date",
    "random_element",
    "random_optional",
    "random_query_item",
    "random_string",
    "random_url",
    "random_url_components",
    "random_uuid",
]
