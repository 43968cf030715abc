"""
Pytest configuration for the HIBP lookup client.

Provides fixtures for:
- Settings isolated from the host environment
- A mock HIBP service built on httpx.MockTransport
- A LookupClient wired to that mock service
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generator, List, Optional

import httpx
import pytest

from hibp_client.client import LookupClient
from hibp_client.config import Settings, get_settings

TEST_API_KEY = "test-key"
TEST_USER_AGENT = "hibp-client-tests"


@dataclass
class MockService:
    """
    Stand-in for the remote API.

    Replies with `status` and `payload` (JSON-encoded unless it is bytes) and
    records every request and response it handled.
    """

    status: int = 200
    payload: Any = field(default_factory=list)
    headers: Optional[dict] = None
    error: Optional[Callable[[httpx.Request], Exception]] = None
    requests: List[httpx.Request] = field(default_factory=list)
    responses: List[httpx.Response] = field(default_factory=list)

    def reply(self, status: int, payload: Any = None, headers: Optional[dict] = None) -> None:
        self.status = status
        self.payload = payload
        self.headers = headers

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        if isinstance(self.payload, bytes):
            response = httpx.Response(self.status, content=self.payload, headers=self.headers)
        elif self.payload is None:
            response = httpx.Response(self.status, headers=self.headers)
        else:
            response = httpx.Response(self.status, json=self.payload, headers=self.headers)
        self.responses.append(response)
        return response

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the mock service"
        return self.requests[-1]


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific values, independent of env and `.env`.
    """
    return Settings(
        _env_file=None,
        hibp_api_key=TEST_API_KEY,
        hibp_user_agent=TEST_USER_AGENT,
        hibp_timeout_seconds=2.0,
        log_level="DEBUG",
    )


@pytest.fixture
def mock_service() -> MockService:
    return MockService()


@pytest.fixture
def client(test_settings: Settings, mock_service: MockService) -> Generator[LookupClient, None, None]:
    """
    LookupClient routed to the mock service.
    """
    lookup = LookupClient(test_settings, transport=httpx.MockTransport(mock_service))
    try:
        yield lookup
    finally:
        lookup.close()
