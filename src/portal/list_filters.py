# This file implements the client-side list filters used by portal pages.
# It exists so free-text search, category chips, status tabs, and ownership scoping behave the same everywhere.
# Ownership always comes from an explicit relation column such as assigned_agent_id or member_id.
# All helpers return new DataFrames and never mutate the cached snapshot they receive.

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd

ALL_CATEGORIES = "Semua"


def search_records(frame: pd.DataFrame, query: str | None, fields: Sequence[str]) -> pd.DataFrame:
    needle = (query or "").strip().lower()
    if not needle or not fields or frame.empty:
        return frame

    mask = pd.Series(False, index=frame.index)
    for field in fields:
        if field not in frame.columns:
            continue
        values = frame[field].astype("string").str.lower()
        mask |= values.str.contains(needle, regex=False, na=False)
    return frame[mask]


def filter_category(
    frame: pd.DataFrame,
    category: str | None,
    *,
    field: str = "category",
    all_label: str = ALL_CATEGORIES,
) -> pd.DataFrame:
    if category is None or category == all_label or frame.empty:
        return frame
    return frame[frame[field] == category]


def filter_records(
    frame: pd.DataFrame,
    query: str | None,
    fields: Sequence[str],
    *,
    category: str | None = None,
    category_field: str = "category",
    all_label: str = ALL_CATEGORIES,
) -> pd.DataFrame:
    searched = search_records(frame, query, fields)
    return filter_category(searched, category, field=category_field, all_label=all_label)


def filter_status(frame: pd.DataFrame, status: str | None) -> pd.DataFrame:
    if status is None or frame.empty:
        return frame
    return frame[frame["status"] == status]


def owned_by(frame: pd.DataFrame, field: str, owner_id: str | None) -> pd.DataFrame:
    if owner_id is None:
        return frame.iloc[0:0]
    return frame[frame[field] == owner_id]


def records_for_members(
    frame: pd.DataFrame,
    members: pd.DataFrame,
    *,
    member_field: str = "member_id",
) -> pd.DataFrame:
    member_ids = set(members["id"].dropna().tolist())
    return frame[frame[member_field].isin(member_ids)]


def lookup(frame: pd.DataFrame, record_id: Any) -> dict[str, Any] | None:
    if record_id is None or frame.empty:
        return None
    matches = frame[frame["id"] == record_id]
    if matches.empty:
        return None
    return matches.iloc[0].to_dict()


def count_where(frame: pd.DataFrame, field: str, value: Any) -> int:
    if frame.empty or field not in frame.columns:
        return 0
    return int((frame[field] == value).sum())
