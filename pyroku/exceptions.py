"""Exception classes for pyroku library."""

from __future__ import annotations


class RokuError(Exception):
    """Base exception for all Roku ECP errors."""


class RokuRequestError(RokuError):
    """Raised when there is an error communicating with the Roku device.

    Carries the endpoint and the underlying transport error for debugging.
    """

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        last_error: Exception | None = None,
        operation_context: str | None = None,
    ) -> None:
        """Initialize request error with context.

        Args:
            message: The error message
            endpoint: URL or path that failed
            last_error: The underlying exception that caused this error
            operation_context: Context about what operation was being performed
        """
        self.endpoint = endpoint
        self.last_error = last_error
        self.operation_context = operation_context or "api_call"
        super().__init__(message)

    def __str__(self) -> str:
        """String representation with context."""
        context_parts = []

        if self.endpoint:
            context_parts.append(f"endpoint={self.endpoint}")
        if self.operation_context != "api_call":
            context_parts.append(f"context={self.operation_context}")

        if context_parts:
            return f"{super().__str__()} ({', '.join(context_parts)})"
        return super().__str__()


class RokuResponseError(RokuRequestError):
    """Raised when the Roku device answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status: int,
        endpoint: str | None = None,
    ) -> None:
        self.status = status
        super().__init__(message, endpoint=endpoint, operation_context=f"status={status}")


class RokuTimeoutError(RokuRequestError):
    """Raised when a request to the Roku device times out."""


class RokuConnectionError(RokuRequestError):
    """Raised on network-level connectivity problems (refused, unreachable, …)."""


class RokuDiscoveryError(RokuRequestError):
    """The SSDP transport failed while searching for devices."""


class RokuAddressError(RokuError, ValueError):
    """A device address (manual or from a discovery LOCATION) is not a valid URL."""


class RokuInvalidDataError(RokuError):
    """The device responded with malformed XML or a document of the wrong shape."""


class RokuArgumentError(RokuError, ValueError):
    """A precondition on caller-supplied data failed; no request was sent."""
