from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

import pytest

from gandi_hosting import Hosting, OperationTracker


@dataclass(frozen=True, slots=True)
class _Expectation:
    method: str
    params: list[Any]
    response: Any = None
    error: Exception | None = None


@dataclass
class FakeCaller:
    """Caller double replaying scripted responses in order.

    Every call must match the next expectation exactly, method and
    positional parameters included.
    """

    _expected: deque[_Expectation] = field(default_factory=deque)
    calls: list[tuple[str, list[Any]]] = field(default_factory=list)

    def expect(
        self,
        method: str,
        params: list[Any],
        response: Any = None,
        *,
        error: Exception | None = None,
    ) -> FakeCaller:
        self._expected.append(_Expectation(method, params, response, error))
        return self

    def expect_status(self, operation_id: int, *statuses: str) -> FakeCaller:
        for status in statuses:
            self.expect("operation.info", [operation_id], {"id": operation_id, "status": status})
        return self

    def send(self, method: str, params: list[Any]) -> Any:
        self.calls.append((method, params))
        if not self._expected:
            raise AssertionError(f"Unexpected call {method}({params!r})")
        exp = self._expected.popleft()
        assert (method, params) == (exp.method, exp.params), (
            f"Expected {exp.method}({exp.params!r}), got {method}({params!r})"
        )
        if exp.error is not None:
            raise exp.error
        return exp.response

    @property
    def pending(self) -> list[str]:
        return [e.method for e in self._expected]


@pytest.fixture
def caller() -> Iterator[FakeCaller]:
    fake = FakeCaller()
    yield fake
    assert not fake.pending, f"Expected calls never made: {fake.pending}"


@pytest.fixture
def tracker(caller: FakeCaller) -> OperationTracker:
    return OperationTracker(caller, poll_interval=0)


@pytest.fixture
def hosting(caller: FakeCaller, tracker: OperationTracker) -> Hosting:
    return Hosting(caller, tracker=tracker)
