# This test file verifies sign-in, session refresh, logout, and role checks against a stub API.
# It exists so an invalid session always ends in a clean logout and a valid one refreshes every query.
# A plain dict stands in for Streamlit session state.

from __future__ import annotations

from typing import Any

import pytest

from src.portal.api_client import ApiRejectedError, ApiUnavailableError
from src.portal.data_access import PortalDataAccess
from src.portal.portal_config import PortalConfig
from src.portal.session import (
    PATH_KEY,
    SESSION_KEY,
    SessionError,
    SessionUser,
    current_user,
    is_allowed,
    logout,
    refresh_session,
    sign_in,
)


class _SessionClient:
    def __init__(self, outcome: Any) -> None:
        self.outcome = outcome
        self.emails: list[str] = []

    def get_session(self, email: str) -> dict[str, Any] | None:
        self.emails.append(email)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def _access(outcome: Any) -> PortalDataAccess:
    return PortalDataAccess(
        config=PortalConfig(api_base_url="http://localhost:5000"),
        api_client=_SessionClient(outcome),
    )


AGENT = {"id": "a-1", "name": "Agent Satu", "email": "agent@example.com", "role": "agent"}


def test_sign_in_stores_user_and_clears_path() -> None:
    state: dict[str, Any] = {PATH_KEY: "/ms-panel-9921/admins"}
    access = _access(AGENT)

    user = sign_in(state, access, "  agent@example.com ")

    assert user == SessionUser(id="a-1", name="Agent Satu", email="agent@example.com", role="agent")
    assert current_user(state) == user
    assert PATH_KEY not in state
    assert access.api_client.emails == ["agent@example.com"]


@pytest.mark.parametrize(
    ("email", "outcome", "message"),
    [
        ("", AGENT, "Email diperlukan"),
        ("ghost@example.com", None, "User tidak ditemukan"),
        ("agent@example.com", ApiUnavailableError("down"), "Server tidak dapat dihubungi"),
        ("agent@example.com", ApiRejectedError("Akun dinonaktifkan", status_code=403), "Akun dinonaktifkan"),
        ("agent@example.com", {**AGENT, "role": "guest"}, "Unsupported role"),
        ("agent@example.com", {key: value for key, value in AGENT.items() if key != "id"}, "Invalid session payload"),
    ],
)
def test_sign_in_failures_raise_session_error(email: str, outcome: Any, message: str) -> None:
    state: dict[str, Any] = {}

    with pytest.raises(SessionError, match=message):
        sign_in(state, _access(outcome), email)

    assert SESSION_KEY not in state


def test_refresh_session_invalidates_all_queries() -> None:
    state: dict[str, Any] = {}
    access = _access(AGENT)
    sign_in(state, access, AGENT["email"])
    access.cache.set(("/api/members", "a-1"), "cached")
    access.cache.set(("/api/deposits", "a-1"), "cached")

    assert refresh_session(state, access) is True
    assert access.cache.keys() == []
    assert current_user(state).id == "a-1"


def test_refresh_session_logs_out_when_session_is_gone() -> None:
    state: dict[str, Any] = {}
    access = _access(AGENT)
    sign_in(state, access, AGENT["email"])
    state[PATH_KEY] = "/ag-panel-7781/commission"
    access.api_client.outcome = None

    assert refresh_session(state, access) is False
    assert current_user(state) is None
    assert PATH_KEY not in state


def test_refresh_session_logs_out_when_api_is_down() -> None:
    state: dict[str, Any] = {}
    access = _access(AGENT)
    sign_in(state, access, AGENT["email"])
    access.api_client.outcome = ApiUnavailableError("down")

    assert refresh_session(state, access) is False
    assert current_user(state) is None


def test_refresh_session_logs_out_on_malformed_payload() -> None:
    state: dict[str, Any] = {}
    access = _access(AGENT)
    sign_in(state, access, AGENT["email"])
    access.api_client.outcome = {"name": "Agen", "email": AGENT["email"], "role": "agent"}

    assert refresh_session(state, access) is False
    assert current_user(state) is None


def test_refresh_without_user_is_false() -> None:
    assert refresh_session({}, _access(AGENT)) is False


def test_logout_and_role_checks() -> None:
    state: dict[str, Any] = {}
    user = sign_in(state, _access(AGENT), AGENT["email"])

    assert is_allowed(user, "agent")
    assert not is_allowed(user, "admin")
    assert not is_allowed(None, "agent")

    logout(state)
    assert current_user(state) is None
