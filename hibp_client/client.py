"""
Lookup client for the Have I Been Pwned v3 API.

All four lookups share one request routine: compose `<operation>/<identifier>`
under the service root, attach the identification and API-key headers, issue
a single GET, classify the status, then decode the body.

Usage:
    from hibp_client import LookupClient, Settings

    with LookupClient(Settings(hibp_api_key="...")) as client:
        breaches = client.search_by_account("test@example.com", truncate=False)

A 404 is the "no data" outcome: list lookups return `[]` and
`get_breach_by_name` returns an empty `BreachRecord`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from hibp_client.config import Settings, get_settings
from hibp_client.domain.models import BreachRecord, PasteRecord
from hibp_client.errors import (
    ERROR_BY_KIND,
    DecodeError,
    RateLimited,
    StatusKind,
    TransportError,
    classify_status,
)
from hibp_client.infrastructure.http_factory import build_http_client
from hibp_client.utils.logging import get_logger, redact_headers

log = get_logger(__name__)

API_KEY_HEADER = "hibp-api-key"

_BREACH_LIST = TypeAdapter(List[BreachRecord])
_PASTE_LIST = TypeAdapter(List[PasteRecord])
_BREACH = TypeAdapter(BreachRecord)


def _query_params(domain_filter: str, truncate: bool, include_unverified: bool) -> Dict[str, str]:
    """Encode the optional query parameters; omitted flags keep service defaults."""
    params: Dict[str, str] = {}
    if domain_filter:
        params["domain"] = domain_filter
    if not truncate:
        params["truncateResponse"] = "false"
    if include_unverified:
        params["includeUnverified"] = "true"
    return params


def _path_segment(identifier: str) -> str:
    """Percent-encode one path segment. Dot-only segments are escaped too."""
    segment = quote(identifier, safe="")
    if segment and segment.strip(".") == "":
        segment = segment.replace(".", "%2E")
    return segment


def _parse_retry_after(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class LookupClient:
    """
    Synchronous client for the breach and paste lookups.

    Holds read-only settings and one `httpx.Client`; safe to share between
    threads. Close it (or use it as a context manager) to release the
    connection pool.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._http = build_http_client(self._settings, transport=transport)

    def __enter__(self) -> "LookupClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def search_by_account(
        self,
        account: str,
        domain_filter: str = "",
        truncate: bool = True,
        include_unverified: bool = False,
    ) -> List[BreachRecord]:
        """
        Return every breach the account (email or username) appears in.

        Parameters
        ----------
        account : str
            Identifier to search for; percent-encoded into the path.
        domain_filter : str
            Restrict results to breaches of this domain when non-empty.
        truncate : bool
            When False, request full breach records instead of names only.
        include_unverified : bool
            Include breaches flagged as unverified.
        """
        body = self._request("breachedaccount", account, domain_filter, truncate, include_unverified)
        if body is None:
            return []
        return self._decode(_BREACH_LIST, body)

    def list_all_breaches(self, domain_filter: str = "") -> List[BreachRecord]:
        """Return every breach loaded into the service, optionally for one domain."""
        body = self._request("breaches", "", domain_filter, truncate=False, include_unverified=False)
        if body is None:
            return []
        return self._decode(_BREACH_LIST, body)

    def get_breach_by_name(self, name: str) -> BreachRecord:
        """
        Return a single breach by its stable name.

        An unknown name yields an empty record (`record.is_empty` is True)
        rather than an error.
        """
        body = self._request("breach", name)
        if body is None:
            return BreachRecord()
        return self._decode(_BREACH, body)

    def pastes_by_account(self, email: str) -> List[PasteRecord]:
        """Return the pastes an email address appears in. Usernames are rejected by the service."""
        body = self._request("pasteaccount", email)
        if body is None:
            return []
        return self._decode(_PASTE_LIST, body)

    def _request(
        self,
        operation: str,
        identifier: str = "",
        domain_filter: str = "",
        truncate: bool = True,
        include_unverified: bool = False,
    ) -> Optional[bytes]:
        """
        Issue one GET and classify its status.

        Returns the raw body on success and None when the service reports no
        data. Raises a `StatusError` subclass for error statuses,
        `TransportError` when no status could be obtained and `DecodeError`
        when the body cannot be content-decoded.
        """
        path = f"{operation}/{_path_segment(identifier)}"
        params = _query_params(domain_filter, truncate, include_unverified)
        headers = {API_KEY_HEADER: self._settings.hibp_api_key}
        log.debug("GET %s params=%s headers=%s", operation, params, redact_headers(headers))

        try:
            with self._http.stream("GET", path, params=params, headers=headers) as response:
                body = response.read()
        except httpx.TransportError as exc:
            raise TransportError(f"GET {operation} failed: {exc}") from exc
        except httpx.DecodingError as exc:
            raise DecodeError(f"GET {operation} returned an undecodable body: {exc}") from exc

        status_code = response.status_code
        kind = classify_status(status_code)
        log.debug("GET %s -> %s (%s)", operation, status_code, kind.value)

        if kind is StatusKind.OK:
            return body
        if kind is StatusKind.NOT_FOUND:
            return None

        url = str(response.url)
        if kind is StatusKind.RATE_LIMITED:
            retry_after = _parse_retry_after(response.headers.get("Retry-After"))
            log.warning("Rate limit exceeded for %s", operation, extra={"retry_after": retry_after})
            raise RateLimited(status_code, url, retry_after=retry_after)
        raise ERROR_BY_KIND[kind](status_code, url)

    @staticmethod
    def _decode(schema: TypeAdapter[Any], body: bytes) -> Any:
        try:
            return schema.validate_json(body)
        except ValidationError as exc:
            raise DecodeError(f"response body does not match the expected schema: {exc}") from exc


# Convenience functions mirroring the plain module-level API


def breached_account(
    account: str,
    domain_filter: str = "",
    truncate: bool = True,
    include_unverified: bool = False,
) -> List[BreachRecord]:
    """Search one account using the process settings."""
    with LookupClient() as client:
        return client.search_by_account(account, domain_filter, truncate, include_unverified)


def breaches(domain_filter: str = "") -> List[BreachRecord]:
    """List all breaches using the process settings."""
    with LookupClient() as client:
        return client.list_all_breaches(domain_filter)


def breach(name: str) -> BreachRecord:
    """Fetch one breach by name using the process settings."""
    with LookupClient() as client:
        return client.get_breach_by_name(name)


def paste_account(email: str) -> List[PasteRecord]:
    """List pastes for an email using the process settings."""
    with LookupClient() as client:
        return client.pastes_by_account(email)


__all__ = [
    "API_KEY_HEADER",
    "LookupClient",
    "breach",
    "breached_account",
    "breaches",
    "paste_account",
]
