# This file renders deposit and withdrawal pages for staff and customers.
# It exists so approval queues, agent deposit lists, withdrawal detection, and customer history share row templates.
# Agent queues are scoped through the explicit member relation; customers only see their own member_id.
# Approve and reject actions are handled by the back office and are shown here read-only.

from __future__ import annotations

from typing import Any

import pandas as pd
import streamlit as st

from src.portal.components.record_list import loading_rows, render_data_view, render_empty, render_query_error
from src.portal.components.summary_cards import MetricCard, render_metric_cards
from src.portal.data_access import QueryResult
from src.portal.data_view import DataView
from src.portal.formatting import display_name, display_text, format_count, format_currency, format_date, short_id
from src.portal.list_filters import count_where, filter_status, lookup, owned_by, records_for_members, search_records
from src.portal.page_context import PageContext
from src.portal.page_views.catalog import bank_card
from src.portal.tooltips import TOOLTIPS
from src.portal.ui_text import DEPOSIT_STATUS_LABELS, WITHDRAWAL_STATUS_LABELS, status_label

STATUS_TABS: tuple[tuple[str, str | None], ...] = (
    ("Semua", None),
    ("Pending", "pending"),
    ("Disetujui", "approved"),
    ("Ditolak", "rejected"),
)


def attach_member_names(frame: pd.DataFrame, members: pd.DataFrame) -> pd.DataFrame:
    """Add member_name and member_email columns looked up through member_id."""

    names = members.set_index("id")["name"] if not members.empty else pd.Series(dtype="object")
    emails = members.set_index("id")["email"] if not members.empty else pd.Series(dtype="object")
    enriched = frame.copy()
    enriched["member_name"] = enriched["member_id"].map(names)
    enriched["member_email"] = enriched["member_id"].map(emails)
    return enriched


def _deposit_row(ctx: PageContext, members: pd.DataFrame):
    def render_row(record: dict[str, Any]) -> None:
        member = lookup(members, record.get("member_id"))
        name_col, amount_col = st.columns([3, 2])
        name_col.markdown(f"**{display_name(member)}**")
        name_col.caption(
            f"#{short_id(record.get('id'))} · "
            f"{format_date(record.get('created_at'), timezone=ctx.config.display_timezone)}"
        )
        amount_col.markdown(f"**{format_currency(record.get('amount'))}**")
        amount_col.markdown(status_label(DEPOSIT_STATUS_LABELS, record.get("status")))
        if record.get("status") == "rejected":
            st.caption(f"Alasan: {display_text(record.get('rejection_reason'))}")

    return render_row


def _withdrawal_row(ctx: PageContext, members: pd.DataFrame):
    def render_row(record: dict[str, Any]) -> None:
        member = lookup(members, record.get("member_id"))
        name_col, amount_col = st.columns([3, 2])
        name_col.markdown(f"**{display_name(member)}**")
        name_col.caption(
            f"{display_text(record.get('bank_name'))} · {display_text(record.get('account_number'))} "
            f"a.n. {display_text(record.get('account_name'))}"
        )
        name_col.caption(format_date(record.get("created_at"), timezone=ctx.config.display_timezone))
        amount_col.markdown(f"**{format_currency(record.get('amount'))}**")
        amount_col.markdown(status_label(WITHDRAWAL_STATUS_LABELS, record.get("status")))
        if record.get("status") == "rejected":
            st.caption(f"Alasan: {display_text(record.get('rejection_reason'))}")

    return render_row


def _scoped(ctx: PageContext) -> tuple[str | None, QueryResult]:
    agent_id = ctx.user.id if ctx.user.role == "agent" else None
    return agent_id, ctx.data.members(agent_id=agent_id)


def _scope_frame(ctx: PageContext, frame: pd.DataFrame, members: pd.DataFrame) -> tuple[pd.DataFrame, pd.DataFrame]:
    if ctx.user.role != "agent":
        return frame, members
    mine = owned_by(members, "assigned_agent_id", ctx.user.id)
    return records_for_members(frame, mine), mine


def render_deposit_approval(*, ctx: PageContext) -> None:
    st.header("Persetujuan Deposit")

    with loading_rows(ctx.config.skeleton_rows):
        agent_id, members = _scoped(ctx)
        deposits = ctx.data.deposits(agent_id=agent_id)
    if render_query_error(
        members, data_access=ctx.data, retry_prefix=("/api/members",), key="deposit-approval-members"
    ):
        return
    if render_query_error(deposits, data_access=ctx.data, retry_prefix=("/api/deposits",), key="deposit-approval"):
        return

    frame, member_frame = _scope_frame(ctx, deposits.data, members.data)
    pending = filter_status(frame, "pending")
    render_metric_cards(
        [
            MetricCard("Deposit Pending", format_count(len(pending)), TOOLTIPS["pending_deposits_card"]),
            MetricCard("Total Nominal", format_currency(pending["amount"].sum() if not pending.empty else 0)),
        ]
    )

    view = DataView(
        key="deposit-approval",
        title="Deposit Menunggu Persetujuan",
        status="pending",
        empty_title="Tidak ada deposit pending",
        empty_message="Semua deposit sudah diproses.",
    )
    render_data_view(
        view,
        QueryResult(data=frame),
        data_access=ctx.data,
        retry_prefix=("/api/deposits",),
        row_renderer=_deposit_row(ctx, member_frame),
    )


def render_withdrawal_approval(*, ctx: PageContext) -> None:
    st.header("Persetujuan Penarikan")

    with loading_rows(ctx.config.skeleton_rows):
        agent_id, members = _scoped(ctx)
        withdrawals = ctx.data.withdrawals(agent_id=agent_id)
    if render_query_error(
        members, data_access=ctx.data, retry_prefix=("/api/members",), key="withdrawal-approval-members"
    ):
        return
    if render_query_error(
        withdrawals, data_access=ctx.data, retry_prefix=("/api/withdrawals",), key="withdrawal-approval"
    ):
        return

    frame, member_frame = _scope_frame(ctx, withdrawals.data, members.data)
    pending = filter_status(frame, "pending")
    render_metric_cards(
        [
            MetricCard("Penarikan Pending", format_count(len(pending)), TOOLTIPS["pending_withdrawals_card"]),
            MetricCard("Total Nominal", format_currency(pending["amount"].sum() if not pending.empty else 0)),
        ]
    )

    view = DataView(
        key="withdrawal-approval",
        title="Penarikan Menunggu Persetujuan",
        status="pending",
        empty_title="Tidak ada penarikan pending",
        empty_message="Semua penarikan sudah diproses.",
    )
    render_data_view(
        view,
        QueryResult(data=frame),
        data_access=ctx.data,
        retry_prefix=("/api/withdrawals",),
        row_renderer=_withdrawal_row(ctx, member_frame),
    )


def render_agent_deposits(*, ctx: PageContext) -> None:
    st.header("Deposit Pelanggan")

    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members(agent_id=ctx.user.id)
        deposits = ctx.data.deposits(agent_id=ctx.user.id)
    if render_query_error(members, data_access=ctx.data, retry_prefix=("/api/members",), key="agent-deposits-members"):
        return

    mine = owned_by(members.data, "assigned_agent_id", ctx.user.id)
    scoped = QueryResult(
        data=records_for_members(deposits.data, mine),
        status=deposits.status,
        error=deposits.error,
    )
    view = DataView(
        key="agent-deposits",
        title="Riwayat Deposit",
        subtitle="Deposit dari pelanggan yang Anda kelola",
        empty_title="Belum ada deposit",
    )
    render_data_view(
        view,
        scoped,
        data_access=ctx.data,
        retry_prefix=("/api/deposits",),
        row_renderer=_deposit_row(ctx, mine),
    )


def render_withdrawal_detection(*, ctx: PageContext) -> None:
    st.header("Deteksi Penarikan")
    st.caption("Pantau pola penarikan dan anggota dengan penarikan terkunci")

    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members()
        withdrawals = ctx.data.withdrawals()
    if render_query_error(members, data_access=ctx.data, retry_prefix=("/api/members",), key="detection-members"):
        return
    if render_query_error(
        withdrawals, data_access=ctx.data, retry_prefix=("/api/withdrawals",), key="detection-withdrawals"
    ):
        return

    member_frame = members.data
    frame = attach_member_names(withdrawals.data, member_frame)
    locked = member_frame[member_frame["withdrawal_locked"]]
    render_metric_cards(
        [
            MetricCard("Total Penarikan", format_count(len(frame))),
            MetricCard(
                "Penarikan Pending",
                format_count(count_where(frame, "status", "pending")),
                TOOLTIPS["pending_withdrawals_card"],
            ),
            MetricCard("Penarikan Terkunci", format_count(len(locked))),
        ]
    )

    query = st.text_input(
        "Cari penarikan",
        key="detection-search",
        placeholder="Cari nama atau email anggota...",
        label_visibility="collapsed",
    )
    searched = search_records(frame, query, ("member_name", "member_email"))

    row = _withdrawal_row(ctx, member_frame)
    tabs = st.tabs([label for label, _ in STATUS_TABS])
    for tab, (label, status) in zip(tabs, STATUS_TABS):
        with tab:
            rows = filter_status(searched, status)
            if rows.empty:
                render_empty(f"Tidak ada penarikan {label.lower()}")
                continue
            for record in rows.to_dict("records"):
                with st.container(border=True):
                    row(record)

    st.subheader(f"Anggota dengan Penarikan Terkunci ({len(locked)})")
    if locked.empty:
        render_empty("Tidak ada penarikan terkunci")
        return
    for record in locked.to_dict("records"):
        with st.container(border=True):
            st.markdown(f"**{display_name(record)}** · {display_text(record.get('email'))}")
            st.caption(display_text(record.get("withdrawal_lock_reason"), fallback="Tanpa alasan"))


def render_customer_history(*, ctx: PageContext) -> None:
    st.header("Riwayat")

    with loading_rows(ctx.config.skeleton_rows):
        deposits = ctx.data.deposits()
        withdrawals = ctx.data.withdrawals()

    deposit_tab, withdrawal_tab = st.tabs(["Deposit", "Penarikan"])
    with deposit_tab:
        view = DataView(
            key="history-deposits",
            title="Riwayat Deposit",
            owner_field="member_id",
            empty_title="Belum ada deposit",
        )
        render_data_view(
            view,
            deposits,
            data_access=ctx.data,
            retry_prefix=("/api/deposits",),
            owner_id=ctx.user.id,
            row_renderer=_customer_transfer_row(ctx, DEPOSIT_STATUS_LABELS),
        )
    with withdrawal_tab:
        view = DataView(
            key="history-withdrawals",
            title="Riwayat Penarikan",
            owner_field="member_id",
            empty_title="Belum ada penarikan",
        )
        render_data_view(
            view,
            withdrawals,
            data_access=ctx.data,
            retry_prefix=("/api/withdrawals",),
            owner_id=ctx.user.id,
            row_renderer=_customer_transfer_row(ctx, WITHDRAWAL_STATUS_LABELS),
        )


def _customer_transfer_row(ctx: PageContext, labels: dict[str, str]):
    def render_row(record: dict[str, Any]) -> None:
        amount_col, status_col = st.columns([3, 2])
        amount_col.markdown(f"**{format_currency(record.get('amount'))}**")
        amount_col.caption(format_date(record.get("created_at"), timezone=ctx.config.display_timezone))
        status_col.markdown(status_label(labels, record.get("status")))
        if record.get("status") == "rejected":
            st.caption(f"Alasan: {display_text(record.get('rejection_reason'))}")

    return render_row


def render_customer_deposit(*, ctx: PageContext) -> None:
    st.header("Deposit Saldo")
    st.caption("Transfer ke salah satu rekening berikut, lalu hubungi agent Anda untuk konfirmasi")

    with loading_rows(ctx.config.skeleton_rows):
        banks = ctx.data.system_banks(active_only=True)

    view = DataView(
        key="customer-deposit-banks",
        title="Rekening Tujuan",
        empty_title="Belum ada rekening tujuan",
        empty_message="Silakan hubungi agent Anda.",
    )
    render_data_view(
        view,
        banks,
        data_access=ctx.data,
        retry_prefix=("/api/system-banks/active",),
        row_renderer=bank_card,
    )


