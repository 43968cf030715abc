"""
Infrastructure package for the HIBP lookup client.

Centralizes HTTP transport concerns (base URL, timeout, identification
header). Keep this layer focused on I/O configuration, decoupled from
request composition and response interpretation.
"""

from hibp_client.infrastructure.http_factory import build_http_client

__all__ = [
    "build_http_client",
]
