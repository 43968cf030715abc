"""
HTTP client factory for the HIBP lookup client.

Centralizes transport configuration (base URL, identification header,
timeout) so `LookupClient` only deals with request composition and response
interpretation. The API key is attached per request rather than stored
in the client headers.
"""

from __future__ import annotations

from typing import Optional

import httpx

from hibp_client.config import Settings, get_settings


def build_http_client(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """
    Create a synchronous httpx client bound to the configured service root.

    Parameters
    ----------
    settings : Settings, optional
        Effective settings; defaults to the cached process settings.
    transport : httpx.BaseTransport, optional
        Custom transport, e.g. `httpx.MockTransport` in tests.

    Returns
    -------
    httpx.Client
        A client the caller owns and must close.
    """
    settings = settings or get_settings()
    return httpx.Client(
        base_url=settings.hibp_base_url,
        headers={"User-Agent": settings.hibp_user_agent},
        timeout=settings.hibp_timeout_seconds,
        transport=transport,
    )


__all__ = ["build_http_client"]
