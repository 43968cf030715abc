"""Request composition: paths, query parameters and headers."""

from __future__ import annotations

import pytest

EXPECTED_QUERY_ABSENT = None


def test_search_by_account_path_and_headers(client, mock_service, test_settings) -> None:
    client.search_by_account("test@example.com")

    request = mock_service.last_request
    assert request.method == "GET"
    assert request.url.host == "haveibeenpwned.com"
    assert request.url.path == "/api/v3/breachedaccount/test@example.com"
    assert request.headers["hibp-api-key"] == test_settings.hibp_api_key
    assert request.headers["User-Agent"] == test_settings.hibp_user_agent


def test_account_is_percent_encoded_in_a_single_segment(client, mock_service) -> None:
    client.search_by_account("some user/alias")

    raw_path = mock_service.last_request.url.raw_path
    assert raw_path.startswith(b"/api/v3/breachedaccount/some%20user%2Falias")


@pytest.mark.parametrize(
    ("truncate", "expected"),
    [(False, "false"), (True, EXPECTED_QUERY_ABSENT)],
)
def test_truncate_flag(client, mock_service, truncate: bool, expected) -> None:
    client.search_by_account("test@example.com", "", truncate, False)

    assert mock_service.last_request.url.params.get("truncateResponse") == expected


@pytest.mark.parametrize(
    ("include_unverified", "expected"),
    [(True, "true"), (False, EXPECTED_QUERY_ABSENT)],
)
def test_include_unverified_flag(client, mock_service, include_unverified: bool, expected) -> None:
    client.search_by_account("test@example.com", "", True, include_unverified)

    assert mock_service.last_request.url.params.get("includeUnverified") == expected


@pytest.mark.parametrize(
    ("domain_filter", "expected"),
    [("adobe.com", "adobe.com"), ("", EXPECTED_QUERY_ABSENT)],
)
def test_domain_filter(client, mock_service, domain_filter: str, expected) -> None:
    client.search_by_account("test@example.com", domain_filter, True, False)

    assert mock_service.last_request.url.params.get("domain") == expected


def test_defaults_send_no_query_string(client, mock_service) -> None:
    client.search_by_account("test@example.com")

    assert not mock_service.last_request.url.params


def test_all_parameters_together(client, mock_service) -> None:
    client.search_by_account("test@example.com", "adobe.com", False, True)

    params = mock_service.last_request.url.params
    assert dict(params) == {
        "domain": "adobe.com",
        "truncateResponse": "false",
        "includeUnverified": "true",
    }


def test_list_all_breaches_uses_empty_segment_and_full_records(client, mock_service) -> None:
    client.list_all_breaches()

    request = mock_service.last_request
    assert request.url.path == "/api/v3/breaches/"
    assert dict(request.url.params) == {"truncateResponse": "false"}


def test_list_all_breaches_forwards_domain_filter(client, mock_service) -> None:
    client.list_all_breaches("adobe.com")

    params = mock_service.last_request.url.params
    assert params.get("domain") == "adobe.com"
    assert "includeUnverified" not in params


def test_get_breach_by_name_path(client, mock_service) -> None:
    mock_service.reply(200, {"Name": "Adobe"})

    client.get_breach_by_name("Adobe")

    request = mock_service.last_request
    assert request.url.path == "/api/v3/breach/Adobe"
    assert not request.url.params


def test_pastes_by_account_path(client, mock_service, test_settings) -> None:
    client.pastes_by_account("test@example.com")

    request = mock_service.last_request
    assert request.url.path == "/api/v3/pasteaccount/test@example.com"
    assert request.headers["hibp-api-key"] == test_settings.hibp_api_key


def test_api_key_is_sent_on_every_call(client, mock_service, test_settings) -> None:
    client.search_by_account("a@example.com")
    client.pastes_by_account("b@example.com")

    assert [r.headers["hibp-api-key"] for r in mock_service.requests] == [test_settings.hibp_api_key] * 2


@pytest.mark.parametrize(
    ("call", "expected_raw_path"),
    [
        (lambda c: c.get_breach_by_name(".."), b"/api/v3/breach/%2E%2E"),
        (lambda c: c.search_by_account("."), b"/api/v3/breachedaccount/%2E"),
        (lambda c: c.pastes_by_account("..."), b"/api/v3/pasteaccount/%2E%2E%2E"),
    ],
)
def test_dot_only_identifiers_stay_in_their_segment(client, mock_service, call, expected_raw_path) -> None:
    mock_service.reply(404)

    call(client)

    assert mock_service.last_request.url.raw_path == expected_raw_path


def test_dots_inside_an_identifier_are_left_alone(client, mock_service) -> None:
    client.search_by_account("first.last@example.com")

    assert mock_service.last_request.url.raw_path == b"/api/v3/breachedaccount/first.last%40example.com"
