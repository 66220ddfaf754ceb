# This test file verifies normalization, caching, and error results in the portal data access layer.
# It exists so pages always receive the same column set and never see raised API errors.
# A stub client records calls so cache reuse can be asserted without HTTP.

from __future__ import annotations

from typing import Any

import pandas as pd

from src.portal.api_client import ApiRejectedError, ApiUnavailableError
from src.portal.data_access import ENTITY_COLUMNS, PortalDataAccess, normalize_records, to_snake_case
from src.portal.portal_config import PortalConfig


class _StubClient:
    def __init__(self, members: list[dict[str, Any]] | None = None) -> None:
        self.members = members or []
        self.calls: list[tuple[str, Any]] = []
        self.fail_with: Exception | None = None

    def get_members(self, *, agent_id: str | None = None) -> list[dict[str, Any]]:
        self.calls.append(("members", agent_id))
        if self.fail_with is not None:
            raise self.fail_with
        return self.members

    def get_activities(self) -> list[dict[str, Any]]:
        self.calls.append(("activities", None))
        raise ApiRejectedError("Forbidden", status_code=403)


def _access(client: _StubClient) -> PortalDataAccess:
    return PortalDataAccess(config=PortalConfig(api_base_url="http://localhost:5000"), api_client=client)


def test_to_snake_case_converts_camel_keys() -> None:
    assert to_snake_case("assignedAgentId") == "assigned_agent_id"
    assert to_snake_case("createdAt") == "created_at"
    assert to_snake_case("id") == "id"


def test_normalize_records_fixes_columns_types_and_order() -> None:
    frame = normalize_records(
        "members",
        [
            {"id": "old", "name": "Ani", "balance": "1500", "createdAt": "2026-01-01T08:00:00Z"},
            {"id": "new", "name": "Budi", "password": "secret", "createdAt": "2026-03-01T08:00:00Z"},
            {"id": "undated", "name": "Citra", "isLocked": True},
        ],
    )

    assert list(frame.columns) == ENTITY_COLUMNS["members"]
    assert "password" not in frame.columns
    assert frame["id"].tolist() == ["new", "old", "undated"]
    assert frame.loc[frame["id"] == "old", "balance"].item() == 1500
    assert frame.loc[frame["id"] == "new", "balance"].item() == 0
    assert frame["credit_score"].tolist() == [100, 100, 100]
    assert frame["is_locked"].tolist() == [False, False, True]
    assert isinstance(frame["created_at"].dtype, pd.DatetimeTZDtype)


def test_normalize_records_empty_rows_keep_columns() -> None:
    frame = normalize_records("deposits", [])

    assert frame.empty
    assert list(frame.columns) == ENTITY_COLUMNS["deposits"]


def test_members_are_cached_per_scope() -> None:
    client = _StubClient(members=[{"id": "m-1", "name": "Ani", "assignedAgentId": "a-1"}])
    access = _access(client)

    first = access.members(agent_id="a-1")
    second = access.members(agent_id="a-1")
    access.members()

    assert first.status == "ok"
    assert second.data.equals(first.data)
    assert client.calls == [("members", "a-1"), ("members", None)]


def test_refresh_prefix_forces_refetch() -> None:
    client = _StubClient(members=[{"id": "m-1"}])
    access = _access(client)

    access.members()
    assert access.refresh(("/api/members",)) == 1
    access.members()

    assert client.calls == [("members", None), ("members", None)]


def test_unavailable_api_returns_error_result_with_empty_frame() -> None:
    client = _StubClient()
    client.fail_with = ApiUnavailableError("api down")
    access = _access(client)

    result = access.members()

    assert result.is_error
    assert result.error == "api down"
    assert result.data.empty
    assert list(result.data.columns) == ENTITY_COLUMNS["members"]
    assert access.cache.keys() == []


def test_rejected_request_returns_error_result() -> None:
    access = _access(_StubClient())

    result = access.activities()

    assert result.is_error
    assert result.error == "Forbidden"
