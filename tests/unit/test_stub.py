"""Tests for the call-recording stubs.

Covers:
  - queue-then-default result order
  - recorded arguments, results, and errors
  - property setters and clear_calls
  - concurrent calls each consume exactly one queued result
"""

import threading

import pytest

from devtesting.stubbing import Failure, Stub, StubCall, Success, ThrowingStub, VoidThrowingStub


class HashableError(Exception):
    """Compares by identity so recorded errors can be matched exactly."""

    def __eq__(self, other):
        return self is other

    def __hash__(self):
        return id(self)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class TestResults:
    def test_success_get_returns_value(self):
        assert Success(3).get() == 3

    def test_failure_get_raises(self):
        error = HashableError()
        with pytest.raises(HashableError) as info:
            Failure(error).get()
        assert info.value is error

    def test_stub_call_return_value_and_error(self):
        error = HashableError()
        assert StubCall("a", Success(1)).return_value == 1
        assert StubCall("a", Success(1)).error is None
        assert StubCall("a", Failure(error)).error is error
        with pytest.raises(HashableError):
            StubCall("a", Failure(error)).return_value


# ---------------------------------------------------------------------------
# ThrowingStub
# ---------------------------------------------------------------------------

class TestThrowingStub:
    def test_returns_default_when_queue_empty(self):
        stub = ThrowingStub.returning("default")
        assert stub("x") == "default"
        assert stub("y") == "default"
        assert stub.call_arguments == ["x", "y"]

    def test_raises_default_error(self):
        error = HashableError()
        stub = ThrowingStub.raising(error)
        with pytest.raises(HashableError):
            stub(1)
        assert stub.calls == [StubCall(1, Failure(error))]

    def test_consumes_queue_before_default(self):
        first, second = HashableError(), HashableError()
        stub = ThrowingStub(
            Success(0),
            [Success(1), Failure(first), Success(2), Failure(second)],
        )

        assert stub("a") == 1
        with pytest.raises(HashableError) as info:
            stub("b")
        assert info.value is first
        assert stub("c") == 2
        with pytest.raises(HashableError) as info:
            stub("d")
        assert info.value is second
        assert stub("e") == 0

        assert stub.result_queue == []
        assert stub.call_arguments == ["a", "b", "c", "d", "e"]
        assert stub.call_results == [
            Success(1), Failure(first), Success(2), Failure(second), Success(0),
        ]

    def test_arguments_default_to_none(self):
        stub = ThrowingStub.returning(5)
        assert stub() == 5
        assert stub.call_arguments == [None]

    def test_tuple_arguments_are_recorded_whole(self):
        stub = ThrowingStub.returning(True)
        stub((1, "two"))
        assert stub.calls[0].arguments == (1, "two")

    def test_setters_replace_default_and_queue(self):
        stub = ThrowingStub.returning(1)
        stub.default_result = Success(2)
        stub.result_queue = [Success(3)]

        assert stub.default_result == Success(2)
        assert stub.result_queue == [Success(3)]
        assert [stub(), stub()] == [3, 2]

    def test_result_queue_getter_returns_copy(self):
        stub = ThrowingStub.returning(0, [Success(1)])
        stub.result_queue.clear()
        assert stub.result_queue == [Success(1)]

    def test_clear_calls(self):
        stub = ThrowingStub.returning(0, [Success(1)])
        stub("a")
        stub.clear_calls()
        assert stub.calls == []
        assert stub("b") == 0

    def test_concurrent_calls_each_take_one_result(self):
        count = 200
        stub = ThrowingStub(Success(-1), [Success(i) for i in range(count)])
        results: list[int] = []
        results_lock = threading.Lock()

        def call(index: int) -> None:
            value = stub(index)
            with results_lock:
                results.append(value)

        threads = [threading.Thread(target=call, args=(i,)) for i in range(count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(results) == list(range(count))
        assert len(stub.calls) == count
        assert sorted(stub.call_arguments) == list(range(count))
        assert stub.result_queue == []


# ---------------------------------------------------------------------------
# Stub
# ---------------------------------------------------------------------------

class TestStub:
    def test_returns_queue_then_default(self):
        stub = Stub("z", ["a", "b"])
        assert [stub(1), stub(2), stub(3)] == ["a", "b", "z"]
        assert stub.call_return_values == ["a", "b", "z"]
        assert stub.call_arguments == [1, 2, 3]

    def test_return_value_properties(self):
        stub = Stub(0, [1, 2])
        assert stub.default_return_value == 0
        assert stub.return_value_queue == [1, 2]

        stub.default_return_value = 9
        stub.return_value_queue = [7]
        assert stub.default_return_value == 9
        assert stub.return_value_queue == [7]
        assert [stub(), stub()] == [7, 9]


# ---------------------------------------------------------------------------
# VoidThrowingStub
# ---------------------------------------------------------------------------

class TestVoidThrowingStub:
    def test_default_succeeds(self):
        stub = VoidThrowingStub()
        assert stub("a") is None
        assert stub.call_errors == [None]

    def test_error_queue_then_default(self):
        error, default = HashableError(), HashableError()
        stub = VoidThrowingStub(default, [None, error])

        assert stub(1) is None
        with pytest.raises(HashableError) as info:
            stub(2)
        assert info.value is error
        with pytest.raises(HashableError) as info:
            stub(3)
        assert info.value is default

        assert stub.call_errors == [None, error, default]
        assert stub.error_queue == []

    def test_error_properties(self):
        error = HashableError()
        stub = VoidThrowingStub()
        assert stub.default_error is None

        stub.default_error = error
        stub.error_queue = [None, error]
        assert stub.default_error is error
        assert stub.error_queue == [None, error]

        stub.default_error = None
        assert stub.default_error is None
