# This file renders the member management pages for master, admin, and agent panels.
# It exists so member lists, approval queues, balances, and lock states share one set of row templates.
# Agents only ever see members whose assigned_agent_id is their own user id, on every page they share with admins.

from __future__ import annotations

from typing import Any

import pandas as pd
import streamlit as st

from src.portal.components.record_list import loading_rows, render_data_view, render_query_error
from src.portal.components.summary_cards import MetricCard, render_metric_cards
from src.portal.components.tables import render_table
from src.portal.data_access import QueryResult
from src.portal.data_view import DataView
from src.portal.formatting import (
    display_text,
    format_count,
    format_currency,
    format_date,
    initial_of,
)
from src.portal.list_filters import count_where, owned_by, search_records
from src.portal.page_context import PageContext
from src.portal.session import SessionUser
from src.portal.tooltips import TOOLTIPS
from src.portal.ui_text import MEMBER_STATUS_LABELS, status_label

MEMBER_SEARCH_FIELDS = ("name", "email", "phone")

MEMBER_TABLE_COLUMNS = {
    "name": "Nama",
    "email": "Email",
    "phone": "Telepon",
    "balance": "Saldo",
    "status": "Status",
    "created_at": "Terdaftar",
}


def _member_row(ctx: PageContext):
    def render_row(record: dict[str, Any]) -> None:
        name_col, balance_col = st.columns([3, 2])
        lock = " :red[:material/lock:]" if record.get("is_locked") else ""
        name_col.markdown(f"**{initial_of(record.get('name'))}** · {display_text(record.get('name'))}{lock}")
        name_col.caption(
            f"{display_text(record.get('email'))} · {display_text(record.get('phone'))}"
        )
        balance_col.markdown(f"**{format_currency(record.get('balance'))}**")
        balance_col.markdown(
            f"{status_label(MEMBER_STATUS_LABELS, record.get('status'))} · "
            f"{format_date(record.get('created_at'), timezone=ctx.config.display_timezone)}"
        )

    return render_row


def render_members(*, ctx: PageContext) -> None:
    st.header("Members")
    st.caption("Daftar seluruh anggota terdaftar")

    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members()
    if render_query_error(members, data_access=ctx.data, retry_prefix=("/api/members",), key="members"):
        return

    frame = members.data
    render_metric_cards(
        [
            MetricCard("Total Anggota", format_count(len(frame)), TOOLTIPS["total_members_card"]),
            MetricCard(
                "Aktif",
                format_count(count_where(frame, "status", "active")),
                TOOLTIPS["active_members_card"],
            ),
            MetricCard(
                "Menunggu",
                format_count(count_where(frame, "status", "pending")),
                TOOLTIPS["pending_members_card"],
            ),
            MetricCard(
                "Terkunci",
                format_count(count_where(frame, "is_locked", True)),
                TOOLTIPS["locked_members_card"],
            ),
        ]
    )

    query = st.text_input(
        "Cari anggota",
        key="members-search",
        placeholder="Cari nama atau email...",
        label_visibility="collapsed",
    )
    rows = search_records(frame, query, ("name", "email"))
    render_table(
        rows,
        title="Anggota",
        columns=MEMBER_TABLE_COLUMNS,
        empty_message="Tidak ada anggota yang cocok.",
        formatters={
            "balance": format_currency,
            "created_at": lambda value: format_date(value, timezone=ctx.config.display_timezone),
        },
    )


def agent_scope(user: SessionUser) -> str | None:
    return user.id if user.role == "agent" else None


def scoped_members(frame: pd.DataFrame, user: SessionUser) -> pd.DataFrame:
    """Agents see only members assigned to them; staff above agents see everyone."""

    agent_id = agent_scope(user)
    if agent_id is None:
        return frame
    return owned_by(frame, "assigned_agent_id", agent_id)


def render_member_approval(*, ctx: PageContext) -> None:
    st.header("Persetujuan Anggota")

    agent_id = agent_scope(ctx.user)
    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members(agent_id=agent_id)

    view = DataView(
        key="member-approval",
        title="Anggota Menunggu Persetujuan",
        subtitle="Pendaftaran melalui kode undangan Anda" if agent_id else "Pendaftaran baru yang belum diaktifkan",
        search_fields=MEMBER_SEARCH_FIELDS,
        search_placeholder="Cari nama, email, atau telepon...",
        status="pending",
        owner_field="assigned_agent_id" if agent_id else None,
        empty_title="Tidak ada anggota menunggu",
        empty_message="Semua pendaftaran sudah diproses.",
    )
    render_data_view(
        view,
        members,
        data_access=ctx.data,
        retry_prefix=("/api/members",),
        owner_id=agent_id,
        row_renderer=_member_row(ctx),
    )


def render_balance(*, ctx: PageContext) -> None:
    agent_id = agent_scope(ctx.user)
    st.header("Saldo Pelanggan" if agent_id else "Saldo Anggota")

    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members(agent_id=agent_id)
    if render_query_error(members, data_access=ctx.data, retry_prefix=("/api/members",), key="balance"):
        return

    frame = scoped_members(members.data, ctx.user)
    render_metric_cards(
        [
            MetricCard(
                "Total Saldo",
                format_currency(frame["balance"].sum() if not frame.empty else 0),
                TOOLTIPS["total_balance_card"],
            ),
            MetricCard("Total Anggota", format_count(len(frame)), TOOLTIPS["total_members_card"]),
        ]
    )

    view = DataView(
        key="balance",
        title="Saldo per Anggota",
        search_fields=("name", "email"),
        search_placeholder="Cari nama atau email...",
        empty_title="Tidak ada anggota",
    )
    render_data_view(
        view,
        QueryResult(data=frame),
        data_access=ctx.data,
        retry_prefix=("/api/members",),
        row_renderer=_member_row(ctx),
    )


def _lock_row(ctx: PageContext):
    def render_row(record: dict[str, Any]) -> None:
        name_col, state_col = st.columns([3, 2])
        name_col.markdown(f"**{display_text(record.get('name'))}**")
        name_col.caption(display_text(record.get("email")))
        if record.get("is_locked"):
            state_col.markdown(":red[:material/lock: Terkunci]")
            state_col.caption(display_text(record.get("lock_reason"), fallback="Tanpa alasan"))
        else:
            state_col.markdown(":green[:material/lock_open: Aktif]")
        if record.get("withdrawal_locked"):
            state_col.caption(
                f"Penarikan dikunci: {display_text(record.get('withdrawal_lock_reason'), fallback='Tanpa alasan')}"
            )

    return render_row


def render_account_lock(*, ctx: PageContext) -> None:
    st.header("Kunci Akun")
    st.caption("Pantau akun anggota yang terkunci")

    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members()
    if render_query_error(members, data_access=ctx.data, retry_prefix=("/api/members",), key="account-lock"):
        return

    frame = members.data
    locked_count = count_where(frame, "is_locked", True)
    render_metric_cards(
        [
            MetricCard("Akun Terkunci", format_count(locked_count), TOOLTIPS["locked_members_card"]),
            MetricCard("Akun Aktif", format_count(len(frame) - locked_count)),
        ]
    )

    locked_tab, active_tab = st.tabs(["Terkunci", "Aktif"])
    with locked_tab:
        locked = members.data[members.data["is_locked"]]
        _render_lock_list(ctx, locked, key="account-lock-locked", empty_title="Tidak ada akun terkunci")
    with active_tab:
        unlocked = members.data[~members.data["is_locked"]]
        _render_lock_list(ctx, unlocked, key="account-lock-active", empty_title="Tidak ada akun aktif")


def _render_lock_list(ctx: PageContext, frame: pd.DataFrame, *, key: str, empty_title: str) -> None:
    view = DataView(
        key=key,
        title=f"{format_count(len(frame))} akun",
        search_fields=("name", "email"),
        search_placeholder="Cari nama atau email...",
        empty_title=empty_title,
    )
    render_data_view(
        view,
        QueryResult(data=frame),
        data_access=ctx.data,
        retry_prefix=("/api/members",),
        row_renderer=_lock_row(ctx),
    )


def render_agent_customers(*, ctx: PageContext) -> None:
    st.header("Pelanggan Saya")

    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members(agent_id=ctx.user.id)

    view = DataView(
        key="agent-customers",
        title="Daftar Pelanggan",
        subtitle="Anggota aktif yang terdaftar melalui Anda",
        search_fields=MEMBER_SEARCH_FIELDS,
        search_placeholder="Cari pelanggan...",
        status="active",
        owner_field="assigned_agent_id",
        empty_title="Belum ada pelanggan",
        empty_message="Pelanggan aktif akan muncul di sini.",
    )
    render_data_view(
        view,
        members,
        data_access=ctx.data,
        retry_prefix=("/api/members",),
        owner_id=ctx.user.id,
        row_renderer=_member_row(ctx),
    )
