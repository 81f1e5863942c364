"""Asynchronous operation tracking.

Every mutating call returns an operation handle. OperationTracker polls
``operation.info`` for that handle until the remote side reports a
terminal status.

Example:
    tracker = OperationTracker(caller, poll_interval=2.0, timeout=300.0)
    op = Operation.from_wire(caller.send("hosting.disk.delete", [disk_id]))
    tracker.wait(op)
"""

from __future__ import annotations

import threading
import time
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from loguru import logger
from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_delay,
    stop_never,
    stop_when_event_set,
    wait_fixed,
)

from gandi_hosting.exceptions import (
    OperationCancelledError,
    OperationFailedError,
    OperationTimeoutError,
)
from gandi_hosting.protocols import Caller

__all__ = [
    "DEFAULT_FAILURE_STATUSES",
    "DEFAULT_SUCCESS_STATUS",
    "Operation",
    "OperationInfo",
    "OperationState",
    "OperationTracker",
]

DEFAULT_SUCCESS_STATUS = "DONE"
DEFAULT_FAILURE_STATUSES: tuple[str, ...] = ("ERROR",)


@dataclass(frozen=True, slots=True)
class Operation:
    """Handle returned by a mutating call.

    Only the resource field matching the call is set; the others stay None.
    """

    id: int
    disk_id: int | None = None
    ip_id: int | None = None
    iface_id: int | None = None
    vm_id: int | None = None

    @classmethod
    def from_wire(cls, wire: Mapping[str, Any]) -> Operation:
        return cls(
            id=wire["id"],
            disk_id=wire.get("disk_id"),
            ip_id=wire.get("ip_id"),
            iface_id=wire.get("iface_id"),
            vm_id=wire.get("vm_id"),
        )


@dataclass(frozen=True, slots=True)
class OperationInfo:
    id: int
    status: str

    @classmethod
    def from_wire(cls, wire: Mapping[str, Any]) -> OperationInfo:
        return cls(id=wire["id"], status=wire["status"])


class OperationState(Enum):
    PENDING = "pending"
    DONE = "done"
    FAILED = "failed"


class _OperationPendingError(Exception):
    """Operation not terminal yet - retry."""

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(status)


class OperationTracker:
    """Waits for operations to reach a terminal status.

    Args:
        caller: Remote call primitive used for ``operation.info``.
        poll_interval: Seconds between two status queries.
        timeout: Seconds before giving up, or None to wait forever.
        success_status: Status label that ends the wait successfully.
        failure_statuses: Status labels that end the wait with an error.
            Any other label keeps polling.
    """

    def __init__(
        self,
        caller: Caller,
        *,
        poll_interval: float = 5.0,
        timeout: float | None = None,
        success_status: str = DEFAULT_SUCCESS_STATUS,
        failure_statuses: Collection[str] = DEFAULT_FAILURE_STATUSES,
    ) -> None:
        self._caller = caller
        self._poll_interval = poll_interval
        self._timeout = timeout
        self._success_status = success_status
        self._failure_statuses = frozenset(failure_statuses)
        self._log = logger.bind(component="operation")

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def classify(self, status: str) -> OperationState:
        if status == self._success_status:
            return OperationState.DONE
        if status in self._failure_statuses:
            return OperationState.FAILED
        return OperationState.PENDING

    def query(self, operation_id: int) -> OperationInfo:
        """Issue a single status query."""
        return OperationInfo.from_wire(self._caller.send("operation.info", [operation_id]))

    def wait(
        self,
        operation: Operation | int,
        *,
        cancel: threading.Event | None = None,
    ) -> OperationInfo:
        """Block until the operation is done.

        Args:
            operation: Operation handle or bare operation id.
            cancel: Optional event; setting it stops the wait.

        Returns:
            The last status seen, always with the success status.

        Raises:
            OperationFailedError: The remote side reported a failure status.
            OperationTimeoutError: The timeout elapsed first.
            OperationCancelledError: ``cancel`` was set first.
            RemoteError: A status query failed. It is not retried.
        """
        operation_id = operation.id if isinstance(operation, Operation) else operation
        last_status = ""

        stop = stop_never if self._timeout is None else stop_after_delay(self._timeout)
        if cancel is not None:
            stop = stop | stop_when_event_set(cancel)

        retrying = Retrying(
            stop=stop,
            wait=wait_fixed(self._poll_interval),
            retry=retry_if_exception_type(_OperationPendingError),
            # cancel.wait returns as soon as the event is set
            sleep=cancel.wait if cancel is not None else time.sleep,
        )

        def _poll() -> OperationInfo:
            nonlocal last_status
            if cancel is not None and cancel.is_set():
                raise _OperationPendingError(last_status)

            info = self.query(operation_id)
            last_status = info.status
            self._log.debug(
                "Operation {op} status: {status}", op=operation_id, status=info.status
            )

            match self.classify(info.status):
                case OperationState.DONE:
                    return info
                case OperationState.FAILED:
                    raise OperationFailedError(operation_id, info.status)
                case OperationState.PENDING:
                    raise _OperationPendingError(info.status)

        try:
            info = retrying(_poll)
        except RetryError as e:
            if cancel is not None and cancel.is_set():
                self._log.warning("Stopped waiting for operation {op}", op=operation_id)
                raise OperationCancelledError(operation_id, last_status) from e
            self._log.warning(
                "Operation {op} timed out in status {status}",
                op=operation_id, status=last_status,
            )
            raise OperationTimeoutError(operation_id, last_status, self._timeout or 0.0) from e
        except OperationFailedError:
            self._log.warning(
                "Operation {op} failed with status {status}",
                op=operation_id, status=last_status,
            )
            raise

        self._log.info("Operation {op} done", op=operation_id)
        return info
