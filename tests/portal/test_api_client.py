# This test file validates the portal API client against bare-array responses and failure statuses.
# It exists so request parameters and the error taxonomy stay stable as endpoints evolve.
# The tests use a fake requests session so no network is involved.

from __future__ import annotations

from typing import Any

import pytest
import requests

from src.portal.api_client import ApiRejectedError, ApiUnavailableError, PortalApiClient


class _FakeResponse:
    def __init__(self, *, status_code: int, payload: Any = None, invalid_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("not json")
        return self._payload


class _FakeSession:
    def __init__(
        self, responses: list[_FakeResponse] | None = None, raise_error: Exception | None = None
    ) -> None:
        self.responses = responses or []
        self.raise_error = raise_error
        self.calls: list[tuple[str, dict[str, Any] | None, int]] = []

    def get(self, url: str, params: dict[str, Any] | None, timeout: int) -> _FakeResponse:
        self.calls.append((url, params, timeout))
        if self.raise_error is not None:
            raise self.raise_error
        return self.responses.pop(0)


def _client(session: _FakeSession) -> PortalApiClient:
    return PortalApiClient(base_url="http://localhost:5000/", timeout_seconds=3, session=session)


def test_get_members_parses_bare_array_and_sends_agent_scope() -> None:
    session = _FakeSession(
        responses=[
            _FakeResponse(
                status_code=200,
                payload=[{"id": "m-1", "name": "Budi", "assignedAgentId": "a-1"}, "ignored"],
            )
        ]
    )

    rows = _client(session).get_members(agent_id="a-1")

    assert rows == [{"id": "m-1", "name": "Budi", "assignedAgentId": "a-1"}]
    assert session.calls == [("http://localhost:5000/api/members", {"agentId": "a-1"}, 3)]


def test_unscoped_requests_send_no_params() -> None:
    session = _FakeSession(responses=[_FakeResponse(status_code=200, payload=[])])

    assert _client(session).get_deposits() == []
    assert session.calls[0][1] is None


def test_active_only_variants_use_dedicated_endpoints() -> None:
    session = _FakeSession(
        responses=[
            _FakeResponse(status_code=200, payload=[]),
            _FakeResponse(status_code=200, payload=[]),
            _FakeResponse(status_code=200, payload=[]),
        ]
    )
    client = _client(session)

    client.get_products(active_only=True)
    client.get_system_banks(active_only=False)
    client.get_notifications(member_id="m-9")

    urls = [call[0] for call in session.calls]
    assert urls == [
        "http://localhost:5000/api/products/active",
        "http://localhost:5000/api/system-banks",
        "http://localhost:5000/api/notifications/member/m-9",
    ]


def test_get_session_returns_user_payload() -> None:
    session = _FakeSession(
        responses=[
            _FakeResponse(
                status_code=200,
                payload={"user": {"id": "u-1", "email": "agent@example.com", "role": "agent"}},
            )
        ]
    )

    user = _client(session).get_session("agent@example.com")

    assert user == {"id": "u-1", "email": "agent@example.com", "role": "agent"}
    assert session.calls[0][1] == {"email": "agent@example.com"}


def test_get_session_returns_none_on_404() -> None:
    session = _FakeSession(
        responses=[_FakeResponse(status_code=404, payload={"error": "User not found"})]
    )

    assert _client(session).get_session("ghost@example.com") is None


def test_client_error_raises_rejected_with_api_message() -> None:
    session = _FakeSession(
        responses=[_FakeResponse(status_code=400, payload={"error": "Email is required"})]
    )

    with pytest.raises(ApiRejectedError, match="Email is required") as excinfo:
        _client(session).get_session("")

    assert excinfo.value.status_code == 400


def test_server_error_raises_unavailable() -> None:
    session = _FakeSession(responses=[_FakeResponse(status_code=503, payload={})])

    with pytest.raises(ApiUnavailableError):
        _client(session).get_activities()


def test_api_transport_error_raises_unavailable() -> None:
    session = _FakeSession(raise_error=requests.ConnectionError("api down"))

    with pytest.raises(ApiUnavailableError):
        _client(session).get_users()


def test_invalid_json_and_wrong_shape_raise_unavailable() -> None:
    session = _FakeSession(
        responses=[
            _FakeResponse(status_code=200, invalid_json=True),
            _FakeResponse(status_code=200, payload={"data": []}),
        ]
    )
    client = _client(session)

    with pytest.raises(ApiUnavailableError, match="valid JSON"):
        client.get_members()
    with pytest.raises(ApiUnavailableError, match="Unexpected payload shape"):
        client.get_members()
