"""
Docs Proxy Exception Hierarchy

Centralized exception classes for the stdio relay and the backend client.
All proxy-specific exceptions inherit from ProxyError.

Usage:
    from docs_proxy.exceptions import BackendError, TransportError

    try:
        response = client.forward_request(request)
    except BackendError as e:
        logger.warning(f"Request failed: {e}")
"""


class ProxyError(Exception):
    """Base exception for all proxy errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Stdio Transport Errors
# =============================================================================


class TransportError(ProxyError):
    """Reading from stdin or writing to stdout failed. Fatal to the session."""

    pass


# =============================================================================
# Backend Errors
# =============================================================================


class BackendError(ProxyError):
    """Base class for a failed exchange with the docs backend."""

    pass


class BackendConnectionError(BackendError):
    """Failed to connect to the docs backend."""

    pass


class BackendTimeoutError(BackendError):
    """Backend exchange did not complete within the request timeout."""

    pass


class BackendStatusError(BackendError):
    """Backend answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ):
        details = {}
        if status_code is not None:
            details["status_code"] = status_code
        if response_text:
            details["response_text"] = response_text[:200]
        super().__init__(message, details)
        self.status_code = status_code
        self.response_text = response_text


class BackendDecodeError(BackendError):
    """Backend body was not valid JSON."""

    pass


class NoResponseError(BackendError):
    """Backend never produced a value carrying `result` or `error`."""

    pass
