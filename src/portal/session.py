# This file manages the signed-in portal user held in Streamlit session state.
# It exists so sign-in, session refresh, logout, and route guarding share one small, testable surface.
# The portal only reads the session endpoint; credential checks belong to the external API.
# State is passed in as a mutable mapping so tests can use a plain dict instead of st.session_state.

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from dataclasses import asdict, dataclass
from typing import Any

from src.portal.api_client import ApiRejectedError, ApiUnavailableError
from src.portal.data_access import PortalDataAccess
from src.portal.portal_config import ROLES

LOGGER = logging.getLogger("portal")

SESSION_KEY = "portal_user"
PATH_KEY = "portal_path"


class SessionError(RuntimeError):
    """Raised when a session cannot be established for the given email."""


@dataclass(frozen=True)
class SessionUser:
    id: str
    name: str
    email: str
    role: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> SessionUser:
        role = str(payload.get("role", ""))
        if role not in ROLES:
            raise SessionError(f"Unsupported role in session payload: {role!r}")
        user_id = payload.get("id")
        if user_id is None or user_id == "":
            raise SessionError("Invalid session payload: missing id")
        return cls(
            id=str(user_id),
            name=str(payload.get("name") or ""),
            email=str(payload.get("email") or ""),
            role=role,
        )


def current_user(state: MutableMapping[str, Any]) -> SessionUser | None:
    raw = state.get(SESSION_KEY)
    if not raw:
        return None
    return SessionUser(**raw)


def sign_in(state: MutableMapping[str, Any], data_access: PortalDataAccess, email: str) -> SessionUser:
    cleaned = email.strip()
    if not cleaned:
        raise SessionError("Email diperlukan")
    try:
        payload = data_access.api_client.get_session(cleaned)
    except ApiRejectedError as exc:
        raise SessionError(str(exc)) from exc
    except ApiUnavailableError as exc:
        raise SessionError("Server tidak dapat dihubungi") from exc
    if payload is None:
        raise SessionError("User tidak ditemukan")

    user = SessionUser.from_payload(payload)
    state[SESSION_KEY] = asdict(user)
    state.pop(PATH_KEY, None)
    LOGGER.info("session started user_id=%s role=%s", user.id, user.role)
    return user


def logout(state: MutableMapping[str, Any]) -> None:
    user = current_user(state)
    state.pop(SESSION_KEY, None)
    state.pop(PATH_KEY, None)
    if user:
        LOGGER.info("session ended user_id=%s", user.id)


def refresh_session(state: MutableMapping[str, Any], data_access: PortalDataAccess) -> bool:
    """Re-read the session and invalidate every query; log out when the session is gone."""

    user = current_user(state)
    if user is None:
        return False
    try:
        payload = data_access.api_client.get_session(user.email)
        refreshed = SessionUser.from_payload(payload) if payload else None
    except (ApiRejectedError, ApiUnavailableError, SessionError) as exc:
        LOGGER.warning("session refresh failed user_id=%s error=%s", user.id, exc)
        refreshed = None

    if refreshed is None:
        logout(state)
        return False

    state[SESSION_KEY] = asdict(refreshed)
    data_access.refresh()
    LOGGER.info("session refreshed user_id=%s", refreshed.id)
    return True


def is_allowed(user: SessionUser | None, role: str) -> bool:
    return user is not None and user.role == role
