"""Call-recording stubs."""

from __future__ import annotations

from devtesting.stubbing.stub import Failure, Result, Stub, StubCall, Success, ThrowingStub, VoidThrowingStub

__all__ = ["Failure", "Result", "Stub", "StubCall", "Success", "ThrowingStub", "VoidThrowingStub"]
