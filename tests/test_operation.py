from __future__ import annotations

import threading
import time

import pytest

from gandi_hosting import (
    Operation,
    OperationCancelledError,
    OperationFailedError,
    OperationState,
    OperationTimeoutError,
    OperationTracker,
    RemoteError,
)

pytestmark = [pytest.mark.unit]


class TestOperationFromWire:
    def test_disk_operation(self):
        op = Operation.from_wire({"id": 1, "disk_id": 42, "step": "WAIT"})
        assert op == Operation(id=1, disk_id=42)

    def test_iface_operation_carries_ip(self):
        op = Operation.from_wire({"id": 7, "iface_id": 3, "ip_id": 987})
        assert op.ip_id == 987
        assert op.iface_id == 3
        assert op.disk_id is None


class TestClassify:
    @pytest.mark.parametrize(
        ("status", "state"),
        [
            ("DONE", OperationState.DONE),
            ("ERROR", OperationState.FAILED),
            ("WAIT", OperationState.PENDING),
            ("RUN", OperationState.PENDING),
            ("BILL", OperationState.PENDING),
            ("", OperationState.PENDING),
        ],
    )
    def test_default_labels(self, caller, status, state):
        assert OperationTracker(caller).classify(status) is state

    def test_custom_failure_labels(self, caller):
        tracker = OperationTracker(caller, failure_statuses=("ERROR", "CANCEL"))
        assert tracker.classify("CANCEL") is OperationState.FAILED


class TestWait:
    def test_done_on_first_poll(self, caller, tracker):
        caller.expect_status(1, "DONE")
        info = tracker.wait(Operation(id=1))
        assert info.status == "DONE"
        assert len(caller.calls) == 1

    def test_keeps_polling_until_done(self, caller, tracker):
        caller.expect_status(5, "WAIT", "RUN", "BILL", "WAIT", "DONE")
        info = tracker.wait(Operation(id=5))
        assert info.id == 5
        assert [params for _, params in caller.calls] == [[5]] * 5

    def test_accepts_bare_operation_id(self, caller, tracker):
        caller.expect_status(9, "DONE")
        assert tracker.wait(9).status == "DONE"

    def test_stops_polling_on_failure(self, caller, tracker):
        caller.expect_status(212, "WAIT", "ERROR")
        with pytest.raises(OperationFailedError) as exc_info:
            tracker.wait(Operation(id=212))
        assert exc_info.value.operation_id == 212
        assert exc_info.value.status == "ERROR"
        assert str(exc_info.value) == "Bad operation status for 212 : ERROR"
        assert len(caller.calls) == 2

    def test_remote_error_is_not_retried(self, caller, tracker):
        caller.expect_status(3, "WAIT")
        caller.expect("operation.info", [3], error=RemoteError("operation.info", "boom"))
        with pytest.raises(RemoteError, match="boom"):
            tracker.wait(Operation(id=3))

    def test_timeout(self, caller):
        caller.expect_status(4, "WAIT")
        tracker = OperationTracker(caller, poll_interval=0, timeout=0)
        with pytest.raises(OperationTimeoutError) as exc_info:
            tracker.wait(Operation(id=4))
        assert exc_info.value.status == "WAIT"
        assert exc_info.value.operation_id == 4

    def test_cancelled_before_first_poll(self, caller, tracker):
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(OperationCancelledError):
            tracker.wait(Operation(id=8), cancel=cancel)
        assert caller.calls == []

    def test_cancel_while_pending(self, caller, tracker):
        cancel = threading.Event()

        original_send = caller.send

        def send_then_cancel(method, params):
            response = original_send(method, params)
            cancel.set()
            return response

        caller.send = send_then_cancel
        caller.expect_status(8, "WAIT")

        with pytest.raises(OperationCancelledError) as exc_info:
            tracker.wait(Operation(id=8), cancel=cancel)

        assert exc_info.value.status == "WAIT"
        assert not isinstance(exc_info.value, OperationFailedError)
        assert len(caller.calls) == 1

    def test_cancel_interrupts_poll_interval(self, caller):
        cancel = threading.Event()
        tracker = OperationTracker(caller, poll_interval=30)

        original_send = caller.send

        def send_then_cancel_soon(method, params):
            response = original_send(method, params)
            threading.Timer(0.05, cancel.set).start()
            return response

        caller.send = send_then_cancel_soon
        caller.expect_status(8, "WAIT")

        started = time.monotonic()
        with pytest.raises(OperationCancelledError):
            tracker.wait(Operation(id=8), cancel=cancel)

        assert time.monotonic() - started < 5
        assert len(caller.calls) == 1
