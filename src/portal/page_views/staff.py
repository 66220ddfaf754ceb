# This file renders the admin and agent account lists for the master and admin panels.
# It exists so staff hierarchies are visible together with how many customers each agent serves.
# Customer counts are derived from the members' assigned_agent_id column.

from __future__ import annotations

from typing import Any

import pandas as pd
import streamlit as st

from src.portal.components.record_list import loading_rows, render_data_view, render_query_error
from src.portal.data_access import QueryResult
from src.portal.data_view import DataView
from src.portal.formatting import display_text, format_count, format_date, initial_of
from src.portal.page_context import PageContext

STAFF_SEARCH_FIELDS = ("name", "email", "username")


def customer_counts(agents: pd.DataFrame, members: pd.DataFrame) -> pd.DataFrame:
    """Return the agents frame with a customer_count column."""

    counts = members["assigned_agent_id"].dropna().value_counts() if not members.empty else pd.Series(dtype="int64")
    enriched = agents.copy()
    enriched["customer_count"] = enriched["id"].map(counts).fillna(0).astype(int)
    return enriched


def _staff_row(ctx: PageContext, *, show_customers: bool):
    def render_row(record: dict[str, Any]) -> None:
        name_col, meta_col = st.columns([3, 2])
        name_col.markdown(f"**{initial_of(record.get('name'))}** · {display_text(record.get('name'))}")
        name_col.caption(f"@{display_text(record.get('username'))} · {display_text(record.get('email'))}")
        state = ":green[Aktif]" if record.get("is_active") else ":gray[Nonaktif]"
        meta_col.markdown(state)
        if show_customers:
            meta_col.caption(f"{format_count(record.get('customer_count'))} pelanggan")
            meta_col.caption(f"Kode undangan: {display_text(record.get('invitation_code'))}")
        meta_col.caption(format_date(record.get("created_at"), timezone=ctx.config.display_timezone))

    return render_row


def render_admins(*, ctx: PageContext) -> None:
    st.header("Admins")

    with loading_rows(ctx.config.skeleton_rows):
        users = ctx.data.users()

    view = DataView(
        key="admins",
        title="Daftar Admin",
        search_fields=STAFF_SEARCH_FIELDS,
        search_placeholder="Cari nama, email, atau username...",
        empty_title="Tidak ada admin",
    )
    admins = QueryResult(data=users.data[users.data["role"] == "admin"], status=users.status, error=users.error)
    render_data_view(
        view,
        admins,
        data_access=ctx.data,
        retry_prefix=("/api/users",),
        row_renderer=_staff_row(ctx, show_customers=False),
    )


def render_agents(*, ctx: PageContext) -> None:
    st.header("Agents")

    with loading_rows(ctx.config.skeleton_rows):
        users = ctx.data.users()
        members = ctx.data.members()
    if render_query_error(members, data_access=ctx.data, retry_prefix=("/api/members",), key="agents-members"):
        return

    agents = customer_counts(users.data[users.data["role"] == "agent"], members.data)

    view = DataView(
        key="agents",
        title="Daftar Agent",
        search_fields=STAFF_SEARCH_FIELDS,
        search_placeholder="Cari nama, email, atau username...",
        empty_title="Tidak ada agent",
    )
    render_data_view(
        view,
        QueryResult(data=agents, status=users.status, error=users.error),
        data_access=ctx.data,
        retry_prefix=("/api/users",),
        row_renderer=_staff_row(ctx, show_customers=True),
    )
