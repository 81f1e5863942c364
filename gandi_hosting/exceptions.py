"""Exception hierarchy for gandi_hosting.

All library exceptions inherit from HostingError, so callers can catch
every hosting failure with a single except clause.

Input errors (NotProvidedError, ParseError, MismatchError) are raised
before any remote call is made for the offending value. RemoteError wraps
transport failures. OperationError subclasses describe how an asynchronous
operation ended when it did not end in success.
"""

from __future__ import annotations


class HostingError(Exception):
    """Base exception for all hosting errors."""


class ConfigurationError(HostingError):
    """Raised for invalid configuration or missing required settings."""


# =============================================================================
# Input Errors
# =============================================================================


class InputError(HostingError):
    """A domain value could not be turned into a wire call."""

    reason = "invalid"

    def __init__(self, fn: str, entity: str, field: str) -> None:
        self.fn = fn
        self.entity = entity
        self.field = field
        super().__init__(f"{fn}: {entity}.{field} {self.reason}")


class NotProvidedError(InputError):
    """A required identifier was empty."""

    reason = "not provided"


class ParseError(InputError):
    """A non-empty value could not be parsed into its wire type."""

    reason = "could not be parsed"


class MismatchError(InputError):
    """Two values that must agree were different."""

    reason = "mismatch"


# =============================================================================
# Remote Errors
# =============================================================================


class RemoteError(HostingError):
    """The remote call primitive failed."""

    def __init__(self, method: str, message: str) -> None:
        self.method = method
        self.message = message
        super().__init__(f"{method}: {message}")


# =============================================================================
# Operation Errors
# =============================================================================


class OperationError(HostingError):
    """An asynchronous operation did not complete successfully."""

    def __init__(self, operation_id: int, status: str, message: str) -> None:
        self.operation_id = operation_id
        self.status = status
        super().__init__(message)


class OperationFailedError(OperationError):
    """The remote side reported a terminal failure status."""

    def __init__(self, operation_id: int, status: str) -> None:
        super().__init__(
            operation_id, status, f"Bad operation status for {operation_id} : {status}"
        )


class OperationTimeoutError(OperationError):
    """The operation did not reach a terminal status before the deadline."""

    def __init__(self, operation_id: int, status: str, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(
            operation_id,
            status,
            f"Operation {operation_id} still {status or 'pending'} after {timeout:.1f}s",
        )


class OperationCancelledError(OperationError):
    """The caller stopped waiting for the operation."""

    def __init__(self, operation_id: int, status: str) -> None:
        super().__init__(
            operation_id,
            status,
            f"Stopped waiting for operation {operation_id} (last status: {status or 'unknown'})",
        )
