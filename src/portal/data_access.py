# This file is the single data interface for the member portal pages.
# It exists so pages can request display-ready DataFrames without caring about transport or caching.
# Every collection goes through the shared query cache and is normalized to a fixed snake_case column set.
# API failures become an explicit error result instead of an exception inside page rendering.

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

import pandas as pd

from src.portal.api_client import ApiRejectedError, ApiUnavailableError, PortalApiClient
from src.portal.portal_config import PortalConfig
from src.portal.query_cache import CacheKey, QueryCache

LOGGER = logging.getLogger("portal")

ENTITY_COLUMNS: Final[dict[str, list[str]]] = {
    "members": [
        "id",
        "name",
        "email",
        "phone",
        "balance",
        "is_locked",
        "lock_reason",
        "withdrawal_locked",
        "withdrawal_lock_reason",
        "status",
        "assigned_agent_id",
        "bank_name",
        "bank_account_number",
        "bank_account_name",
        "credit_score",
        "created_at",
    ],
    "deposits": [
        "id",
        "member_id",
        "amount",
        "status",
        "rejection_reason",
        "proof_url",
        "processed_by",
        "created_at",
        "processed_at",
    ],
    "withdrawals": [
        "id",
        "member_id",
        "amount",
        "status",
        "rejection_reason",
        "bank_name",
        "account_number",
        "account_name",
        "processed_by",
        "created_at",
        "processed_at",
    ],
    "products": [
        "id",
        "name",
        "price",
        "category",
        "image_url",
        "rating",
        "reviews",
        "is_active",
        "created_at",
    ],
    "notifications": [
        "id",
        "member_id",
        "title",
        "message",
        "type",
        "is_read",
        "created_at",
    ],
    "activities": [
        "id",
        "action",
        "description",
        "member_id",
        "user_id",
        "user_role",
        "user_name",
        "created_at",
    ],
    "users": [
        "id",
        "username",
        "name",
        "email",
        "phone",
        "role",
        "parent_id",
        "invitation_code",
        "is_active",
        "created_at",
    ],
    "system_banks": [
        "id",
        "bank_name",
        "account_number",
        "account_name",
        "is_active",
        "created_at",
    ],
}

_NUMERIC_COLUMNS: Final[set[str]] = {"balance", "credit_score", "amount", "price", "rating", "reviews"}
_BOOL_COLUMNS: Final[set[str]] = {"is_locked", "withdrawal_locked", "is_active", "is_read"}
_DATETIME_COLUMNS: Final[set[str]] = {"created_at", "processed_at"}
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class QueryResult:
    data: pd.DataFrame
    status: str = "ok"
    error: str | None = None

    @property
    def is_error(self) -> bool:
        return self.status == "error"


def to_snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def normalize_records(entity: str, rows: list[dict[str, Any]]) -> pd.DataFrame:
    """Build a DataFrame with the entity's full column set and parsed types."""

    columns = ENTITY_COLUMNS[entity]
    frame = pd.DataFrame([{to_snake_case(key): value for key, value in row.items()} for row in rows])
    for column in columns:
        if column not in frame.columns:
            frame[column] = None
    frame = frame[columns].copy()

    for column in columns:
        if column in _DATETIME_COLUMNS:
            frame[column] = pd.to_datetime(frame[column], utc=True, errors="coerce")
        elif column in _NUMERIC_COLUMNS:
            frame[column] = pd.to_numeric(frame[column], errors="coerce")
        elif column in _BOOL_COLUMNS:
            frame[column] = frame[column].fillna(False).astype(bool)

    if entity == "members":
        frame["balance"] = frame["balance"].fillna(0)
        frame["credit_score"] = frame["credit_score"].fillna(100)

    return frame.sort_values("created_at", ascending=False, na_position="last", kind="stable").reset_index(
        drop=True
    )


class PortalDataAccess:
    def __init__(
        self,
        *,
        config: PortalConfig,
        api_client: PortalApiClient | None = None,
        cache: QueryCache | None = None,
    ) -> None:
        self.config = config
        self.api_client = api_client or PortalApiClient(
            base_url=config.api_base_url,
            timeout_seconds=config.request_timeout_seconds,
        )
        self.cache = cache or QueryCache(stale_seconds=config.query_stale_seconds)

    def members(self, *, agent_id: str | None = None) -> QueryResult:
        return self._load(
            ("/api/members", agent_id),
            "members",
            lambda: self.api_client.get_members(agent_id=agent_id),
        )

    def deposits(self, *, agent_id: str | None = None) -> QueryResult:
        return self._load(
            ("/api/deposits", agent_id),
            "deposits",
            lambda: self.api_client.get_deposits(agent_id=agent_id),
        )

    def withdrawals(self, *, agent_id: str | None = None) -> QueryResult:
        return self._load(
            ("/api/withdrawals", agent_id),
            "withdrawals",
            lambda: self.api_client.get_withdrawals(agent_id=agent_id),
        )

    def products(self, *, active_only: bool = True) -> QueryResult:
        key: CacheKey = ("/api/products/active",) if active_only else ("/api/products",)
        return self._load(
            key,
            "products",
            lambda: self.api_client.get_products(active_only=active_only),
        )

    def activities(self) -> QueryResult:
        return self._load(("/api/activities",), "activities", self.api_client.get_activities)

    def notifications(self, *, member_id: str | None = None) -> QueryResult:
        return self._load(
            ("/api/notifications", member_id),
            "notifications",
            lambda: self.api_client.get_notifications(member_id=member_id),
        )

    def users(self) -> QueryResult:
        return self._load(("/api/users",), "users", self.api_client.get_users)

    def system_banks(self, *, active_only: bool = True) -> QueryResult:
        key: CacheKey = ("/api/system-banks/active",) if active_only else ("/api/system-banks",)
        return self._load(
            key,
            "system_banks",
            lambda: self.api_client.get_system_banks(active_only=active_only),
        )

    def refresh(self, prefix: CacheKey | None = None) -> int:
        return self.cache.invalidate(prefix)

    def _load(
        self,
        key: CacheKey,
        entity: str,
        fetcher: Callable[[], list[dict[str, Any]]],
    ) -> QueryResult:
        try:
            frame = self.cache.fetch(key, lambda: normalize_records(entity, fetcher()))
        except (ApiUnavailableError, ApiRejectedError) as exc:
            LOGGER.warning("query failed key=%s error=%s", key, exc)
            return QueryResult(
                data=normalize_records(entity, []),
                status="error",
                error=str(exc),
            )
        return QueryResult(data=frame)
