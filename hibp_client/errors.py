"""
Error taxonomy and status classification for the HIBP lookup client.

`classify_status` is the single mapping from an HTTP status code to an
outcome. Not-found is an outcome, never an error: lookups turn it into an
empty result.
"""

from __future__ import annotations

import enum
from typing import Dict, Optional, Type


class StatusKind(enum.Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID_FORMAT = "invalid_format"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    UNEXPECTED = "unexpected"


_KIND_BY_STATUS: Dict[int, StatusKind] = {
    200: StatusKind.OK,
    400: StatusKind.INVALID_FORMAT,
    401: StatusKind.UNAUTHORIZED,
    404: StatusKind.NOT_FOUND,
    429: StatusKind.RATE_LIMITED,
}


def classify_status(status_code: int) -> StatusKind:
    """
    Map an HTTP status code to its lookup outcome.

    Any status the service does not document maps to `StatusKind.UNEXPECTED`.
    """
    return _KIND_BY_STATUS.get(status_code, StatusKind.UNEXPECTED)


class HIBPError(Exception):
    """Base class for every error raised by the lookup client."""


class StatusError(HIBPError):
    """The service answered with a status that is an error outcome."""

    default_message = "unexpected response status"

    def __init__(self, status_code: int, url: str = "", message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message or f"{self.default_message} (HTTP {status_code})")


class InvalidFormat(StatusError):
    default_message = "the account does not comply with an acceptable format"


class Unauthorized(StatusError):
    default_message = "valid header `hibp-api-key` required"


class RateLimited(StatusError):
    default_message = "too many requests, the rate limit has been exceeded"

    def __init__(
        self,
        status_code: int = 429,
        url: str = "",
        message: Optional[str] = None,
        retry_after: Optional[float] = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(status_code, url, message)


class UnexpectedStatus(StatusError):
    pass


class TransportError(HIBPError):
    """No status was obtained: connection, DNS or timeout failure."""


class DecodeError(HIBPError):
    """A success response whose body does not match the expected schema."""


ERROR_BY_KIND: Dict[StatusKind, Type[StatusError]] = {
    StatusKind.INVALID_FORMAT: InvalidFormat,
    StatusKind.UNAUTHORIZED: Unauthorized,
    StatusKind.RATE_LIMITED: RateLimited,
    StatusKind.UNEXPECTED: UnexpectedStatus,
}


__all__ = [
    "DecodeError",
    "ERROR_BY_KIND",
    "HIBPError",
    "InvalidFormat",
    "RateLimited",
    "StatusError",
    "StatusKind",
    "TransportError",
    "Unauthorized",
    "UnexpectedStatus",
    "classify_status",
]
