"""Test-support utilities: seedable random values and call-recording stubs."""

from __future__ import annotations

from devtesting.collection_generation import generate_dict, generate_list
from devtesting.config.schema import RandomizationConfig
from devtesting.core.prng import SeedableRandomNumberGenerator
from devtesting.core.types import ClosedRange, HalfOpenRange
from devtesting.generating import RandomValueGenerator, make_random_number_generator
from devtesting.stubbing.stub import Failure, Stub, StubCall, Success, ThrowingStub, VoidThrowingStub
from devtesting.values.urls import QueryItem, URLComponents

__all__ = [
    "ClosedRange",
    "Failure",
    "HalfOpenRange",
    "QueryItem",
    "RandomValueGenerator",
    "RandomizationConfig",
    "SeedableRandomNumberGenerator",
    "Stub",
    "StubCall",
    "Success",
    "ThrowingStub",
    "URLComponents",
    "VoidThrowingStub",
    "generate_dict",
    "generate_list",
    "make_random_number_generator",
]
