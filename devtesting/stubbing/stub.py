"""Call-recording stubs for substituting function dependencies in tests.

A stub returns results from a queue, falling back to a default once the
queue is empty, and records every call.  All state is guarded by one
lock: each property access is atomic, and a call dequeues its result and
records itself in a single critical section.  Reading several properties
in a row is not transactional.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

A = TypeVar("A")
R = TypeVar("R")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Success(Generic[R]):
    value: R

    def get(self) -> R:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    error: BaseException

    def get(self) -> Any:
        raise self.error


Result = Union[Success[R], Failure]


def _error_of(result: Result) -> BaseException | None:
    return result.error if isinstance(result, Failure) else None


@dataclass(frozen=True, slots=True)
class StubCall(Generic[A, R]):
    """One recorded invocation."""

    arguments: A
    result: Result[R]

    @property
    def return_value(self) -> R:
        """The returned value; raises the recorded error for failed calls."""
        return self.result.get()

    @property
    def error(self) -> BaseException | None:
        return _error_of(self.result)


# ---------------------------------------------------------------------------
# Stubs
# ---------------------------------------------------------------------------

class ThrowingStub(Generic[A, R]):
    """A stub whose calls either return a value or raise an error.

    Parameters
    ----------
    default_result : Success | Failure
        Used whenever ``result_queue`` is empty.
    result_queue : iterable of Success | Failure
        Consumed front to back, one result per call.
    """

    def __init__(self, default_result: Result[R], result_queue: Iterable[Result[R]] = ()) -> None:
        self._lock = threading.Lock()
        self._default_result = default_result
        self._result_queue: list[Result[R]] = list(result_queue)
        self._calls: list[StubCall[A, R]] = []

    @staticmethod
    def returning(default_return_value: R, result_queue: Iterable[Result[R]] = ()) -> ThrowingStub[A, R]:
        return ThrowingStub(Success(default_return_value), result_queue)

    @staticmethod
    def raising(default_error: BaseException, result_queue: Iterable[Result[R]] = ()) -> ThrowingStub[A, R]:
        return ThrowingStub(Failure(default_error), result_queue)

    @property
    def default_result(self) -> Result[R]:
        with self._lock:
            return self._default_result

    @default_result.setter
    def default_result(self, result: Result[R]) -> None:
        with self._lock:
            self._default_result = result

    @property
    def result_queue(self) -> list[Result[R]]:
        with self._lock:
            return list(self._result_queue)

    @result_queue.setter
    def result_queue(self, results: Iterable[Result[R]]) -> None:
        results = list(results)
        with self._lock:
            self._result_queue = results

    @property
    def calls(self) -> list[StubCall[A, R]]:
        with self._lock:
            return list(self._calls)

    @property
    def call_arguments(self) -> list[A]:
        return [call.arguments for call in self.calls]

    @property
    def call_results(self) -> list[Result[R]]:
        return [call.result for call in self.calls]

    def clear_calls(self) -> None:
        with self._lock:
            self._calls = []

    def _record(self, arguments: A) -> Result[R]:
        with self._lock:
            result = self._result_queue.pop(0) if self._result_queue else self._default_result
            self._calls.append(StubCall(arguments, result))
        return result

    def __call__(self, arguments: A = None) -> R:
        """Record the call and return, or raise, the next result."""
        return self._record(arguments).get()


class Stub(ThrowingStub[A, R]):
    """A stub that always returns a value."""

    def __init__(self, default_return_value: R, return_value_queue: Iterable[R] = ()) -> None:
        super().__init__(Success(default_return_value), [Success(value) for value in return_value_queue])

    @property
    def default_return_value(self) -> R:
        return self.default_result.value

    @default_return_value.setter
    def default_return_value(self, value: R) -> None:
        self.default_result = Success(value)

    @property
    def return_value_queue(self) -> list[R]:
        return [result.value for result in self.result_queue]

    @return_value_queue.setter
    def return_value_queue(self, values: Iterable[R]) -> None:
        self.result_queue = [Success(value) for value in values]

    @property
    def call_return_values(self) -> list[R]:
        return [call.result.value for call in self.calls]


class VoidThrowingStub(ThrowingStub[A, None]):
    """A stub that returns nothing but may raise.  A None error means success."""

    def __init__(
        self,
        default_error: BaseException | None = None,
        error_queue: Iterable[BaseException | None] = (),
    ) -> None:
        super().__init__(self._to_result(default_error), [self._to_result(error) for error in error_queue])

    @staticmethod
    def _to_result(error: BaseException | None) -> Result[None]:
        return Success(None) if error is None else Failure(error)

    @property
    def default_error(self) -> BaseException | None:
        return _error_of(self.default_result)

    @default_error.setter
    def default_error(self, error: BaseException | None) -> None:
        self.default_result = self._to_result(error)

    @property
    def error_queue(self) -> list[BaseException | None]:
        return [_error_of(result) for result in self.result_queue]

    @error_queue.setter
    def error_queue(self, errors: Iterable[BaseException | None]) -> None:
        self.result_queue = [self._to_result(error) for error in errors]

    @property
    def call_errors(self) -> list[BaseException | None]:
        return [call.error for call in self.calls]

    def __call__(self, arguments: A = None) -> None:
        self._record(arguments).get()
