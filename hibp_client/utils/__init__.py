"""
Utilities package for the HIBP lookup client.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from hibp_client.utils.logging import configure_logging, get_logger, redact_headers

__all__ = [
    "configure_logging",
    "get_logger",
    "redact_headers",
]
