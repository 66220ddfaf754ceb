# This file implements the read-only HTTP client used by every portal page.
# It exists so pages can fetch members, transfers, products, and logs without embedding request details.
# The client converts transport failures and rejections into two clear exception types.
# Keeping API calls here makes the caching and error handling in data_access.py much cleaner.

from __future__ import annotations

from typing import Any

import requests


class ApiUnavailableError(RuntimeError):
    """Raised when the API cannot be reached or responds with server errors."""


class ApiRejectedError(ValueError):
    """Raised when the API answers a request with a 4xx status."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class PortalApiClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int = 8,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def get_members(self, *, agent_id: str | None = None) -> list[dict[str, Any]]:
        params = {"agentId": agent_id} if agent_id else None
        return self._request_list("/api/members", params=params)

    def get_deposits(self, *, agent_id: str | None = None) -> list[dict[str, Any]]:
        params = {"agentId": agent_id} if agent_id else None
        return self._request_list("/api/deposits", params=params)

    def get_withdrawals(self, *, agent_id: str | None = None) -> list[dict[str, Any]]:
        params = {"agentId": agent_id} if agent_id else None
        return self._request_list("/api/withdrawals", params=params)

    def get_products(self, *, active_only: bool = True) -> list[dict[str, Any]]:
        path = "/api/products/active" if active_only else "/api/products"
        return self._request_list(path, params=None)

    def get_activities(self) -> list[dict[str, Any]]:
        return self._request_list("/api/activities", params=None)

    def get_notifications(self, *, member_id: str | None = None) -> list[dict[str, Any]]:
        if member_id:
            return self._request_list(f"/api/notifications/member/{member_id}", params=None)
        return self._request_list("/api/notifications", params=None)

    def get_users(self) -> list[dict[str, Any]]:
        return self._request_list("/api/users", params=None)

    def get_system_banks(self, *, active_only: bool = True) -> list[dict[str, Any]]:
        path = "/api/system-banks/active" if active_only else "/api/system-banks"
        return self._request_list(path, params=None)

    def get_session(self, email: str) -> dict[str, Any] | None:
        try:
            payload = self._request_json("/api/auth/session", params={"email": email})
        except ApiRejectedError as exc:
            if exc.status_code == 404:
                return None
            raise
        if not isinstance(payload, dict):
            raise ApiUnavailableError("Unexpected payload shape from /api/auth/session")
        user = payload.get("user")
        return dict(user) if isinstance(user, dict) else None

    def _request_list(self, path: str, params: dict[str, Any] | None) -> list[dict[str, Any]]:
        payload = self._request_json(path, params=params)
        if not isinstance(payload, list):
            raise ApiUnavailableError(f"Unexpected payload shape from {self.base_url}{path}")
        return [dict(item) for item in payload if isinstance(item, dict)]

    def _request_json(self, path: str, params: dict[str, Any] | None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise ApiUnavailableError(f"API request failed for {url}: {exc}") from exc

        if response.status_code >= 500:
            raise ApiUnavailableError(
                f"API request failed with status {response.status_code} for {url}"
            )
        if response.status_code >= 400:
            raise ApiRejectedError(
                self._rejection_message(response, url),
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ApiUnavailableError(f"API did not return valid JSON for {url}") from exc

    @staticmethod
    def _rejection_message(response: Any, url: str) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            detail = body.get("error") or body.get("message")
            if detail:
                return str(detail)
        return f"API request was rejected with status {response.status_code} for {url}"
