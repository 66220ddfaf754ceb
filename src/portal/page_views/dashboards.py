# This file renders the landing page of each role panel.
# It exists so every role opens on a compact summary of the records it is responsible for.
# Master and admin see system-wide totals; agents see their assigned customers only.
# The customer landing page is the balance card with credit score and quick links.

from __future__ import annotations

import pandas as pd
import streamlit as st

from src.portal.components.charts import render_balance_distribution, render_status_breakdown
from src.portal.components.nav_shell import navigate
from src.portal.components.record_list import loading_rows, render_empty, render_query_error
from src.portal.components.summary_cards import MetricCard, render_metric_cards
from src.portal.formatting import (
    display_name,
    display_text,
    format_count,
    format_currency,
    format_date,
    format_percent,
    initial_of,
)
from src.portal.list_filters import count_where, filter_status, lookup, owned_by, records_for_members
from src.portal.page_context import PageContext
from src.portal.page_views.commission import current_month_commission, monthly_commission
from src.portal.portal_config import PANEL_PATHS
from src.portal.tooltips import TOOLTIPS
from src.portal.ui_text import DEPOSIT_STATUS_LABELS, ROLE_LABELS, status_label


def _total_balance(members: pd.DataFrame) -> float:
    return float(members["balance"].sum()) if not members.empty else 0.0


def _render_recent_activities(ctx: PageContext, activities: pd.DataFrame) -> None:
    st.subheader("Aktivitas Terbaru")
    recent = activities.head(ctx.config.recent_activity_limit)
    if recent.empty:
        render_empty("Belum ada aktivitas")
        return
    for record in recent.to_dict("records"):
        with st.container(border=True):
            left, right = st.columns([4, 1])
            role = record.get("user_role")
            badge = f" {status_label(ROLE_LABELS, role)}" if isinstance(role, str) and role else ""
            left.markdown(f"**{record['action']}**{badge}")
            left.caption(display_text(record.get("description")))
            right.caption(format_date(record.get("created_at"), with_year=False, timezone=ctx.config.display_timezone))


def render_master(*, ctx: PageContext) -> None:
    st.header("Master Dashboard")
    st.caption("Kontrol penuh sistem - kelola admin, agent, dan seluruh anggota")

    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members()
        users = ctx.data.users()
        activities = ctx.data.activities()

    if render_query_error(members, data_access=ctx.data, retry_prefix=("/api/members",), key="master-members"):
        return

    staff = users.data
    render_metric_cards(
        [
            MetricCard("Total Admin", format_count(count_where(staff, "role", "admin"))),
            MetricCard("Total Agent", format_count(count_where(staff, "role", "agent"))),
            MetricCard("Total Anggota", format_count(len(members.data)), TOOLTIPS["total_members_card"]),
            MetricCard(
                "Total Saldo",
                format_currency(_total_balance(members.data)),
                TOOLTIPS["total_balance_card"],
            ),
        ]
    )

    left, right = st.columns(2)
    with left:
        if not render_query_error(
            activities, data_access=ctx.data, retry_prefix=("/api/activities",), key="master-activities"
        ):
            _render_recent_activities(ctx, activities.data)
    with right:
        render_balance_distribution(members.data, help_text=TOOLTIPS["balance_distribution_chart"])


def render_admin(*, ctx: PageContext) -> None:
    st.header("Admin Dashboard")
    st.caption("Kelola anggota, persetujuan transaksi, dan keamanan akun")

    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members()
        deposits = ctx.data.deposits()
        withdrawals = ctx.data.withdrawals()
        activities = ctx.data.activities()

    if render_query_error(members, data_access=ctx.data, retry_prefix=("/api/members",), key="admin-members"):
        return

    member_frame = members.data
    active_count = count_where(member_frame, "status", "active")
    active_share = 100 * active_count / len(member_frame) if len(member_frame) else 0
    render_metric_cards(
        [
            MetricCard("Total Anggota", format_count(len(member_frame)), TOOLTIPS["total_members_card"]),
            MetricCard(
                "Anggota Aktif",
                f"{format_count(active_count)} ({format_percent(round(active_share))})",
                TOOLTIPS["active_members_card"],
            ),
            MetricCard(
                "Akun Terkunci",
                format_count(count_where(member_frame, "is_locked", True)),
                TOOLTIPS["locked_members_card"],
            ),
            MetricCard("Total Saldo", format_currency(_total_balance(member_frame)), TOOLTIPS["total_balance_card"]),
        ]
    )
    render_metric_cards(
        [
            MetricCard(
                "Deposit Pending",
                format_count(count_where(deposits.data, "status", "pending")),
                TOOLTIPS["pending_deposits_card"],
            ),
            MetricCard(
                "Penarikan Pending",
                format_count(count_where(withdrawals.data, "status", "pending")),
                TOOLTIPS["pending_withdrawals_card"],
            ),
            MetricCard(
                "Anggota Menunggu",
                format_count(count_where(member_frame, "status", "pending")),
                TOOLTIPS["pending_members_card"],
            ),
        ]
    )

    left, right = st.columns(2)
    with left:
        st.subheader("Deposit Menunggu Persetujuan")
        pending = filter_status(deposits.data, "pending").head(5)
        if deposits.is_error:
            render_query_error(deposits, data_access=ctx.data, retry_prefix=("/api/deposits",), key="admin-deposits")
        elif pending.empty:
            render_empty("Tidak ada deposit pending")
        else:
            for record in pending.to_dict("records"):
                member = lookup(member_frame, record.get("member_id"))
                with st.container(border=True):
                    name_col, amount_col = st.columns([3, 2])
                    name_col.markdown(f"**{display_name(member)}**")
                    name_col.caption(
                        format_date(record.get("created_at"), with_year=False, timezone=ctx.config.display_timezone)
                    )
                    amount_col.markdown(f"**{format_currency(record.get('amount'))}**")
    with right:
        if not render_query_error(
            activities, data_access=ctx.data, retry_prefix=("/api/activities",), key="admin-activities"
        ):
            _render_recent_activities(ctx, activities.data)

    render_status_breakdown(
        deposits.data,
        title="Status Deposit",
        help_text=TOOLTIPS["status_breakdown_chart"],
    )


def render_agent(*, ctx: PageContext) -> None:
    st.header("Agent Dashboard")
    st.caption(f"Selamat datang, {display_text(ctx.user.name, fallback='Agent')}")

    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members(agent_id=ctx.user.id)
        deposits = ctx.data.deposits(agent_id=ctx.user.id)
        withdrawals = ctx.data.withdrawals(agent_id=ctx.user.id)

    if render_query_error(
        members, data_access=ctx.data, retry_prefix=("/api/members",), key="agent-members"
    ):
        return

    my_members = owned_by(members.data, "assigned_agent_id", ctx.user.id)
    my_customers = filter_status(my_members, "active")
    my_deposits = records_for_members(deposits.data, my_members)
    my_withdrawals = records_for_members(withdrawals.data, my_members)
    history = monthly_commission(
        my_deposits,
        rate_percent=ctx.config.commission_rate_percent,
        timezone=ctx.config.display_timezone,
    )
    this_month = current_month_commission(history, timezone=ctx.config.display_timezone)

    render_metric_cards(
        [
            MetricCard("Pelanggan Saya", format_count(len(my_customers)), TOOLTIPS["my_customers_card"]),
            MetricCard(
                "Saldo Pelanggan",
                format_currency(_total_balance(my_customers)),
                TOOLTIPS["customer_balance_card"],
            ),
            MetricCard(
                "Deposit Pending",
                format_count(count_where(my_deposits, "status", "pending")),
                TOOLTIPS["pending_deposits_card"],
            ),
            MetricCard(
                "Penarikan Pending",
                format_count(count_where(my_withdrawals, "status", "pending")),
                TOOLTIPS["pending_withdrawals_card"],
            ),
            MetricCard("Komisi Bulan Ini", format_currency(this_month), TOOLTIPS["commission_month_card"]),
        ]
    )

    left, right = st.columns(2)
    with left:
        st.subheader("Pelanggan Terbaru")
        if my_customers.empty:
            render_empty("Belum ada pelanggan", "Bagikan kode undangan Anda untuk menambah pelanggan")
        for record in my_customers.head(5).to_dict("records"):
            with st.container(border=True):
                name_col, balance_col = st.columns([3, 2])
                name_col.markdown(f"**{initial_of(record.get('name'))}** · {display_name(record)}")
                name_col.caption(display_text(record.get("email")))
                balance_col.markdown(format_currency(record.get("balance")))
    with right:
        st.subheader("Deposit Terbaru")
        if my_deposits.empty:
            render_empty("Belum ada deposit")
        for record in my_deposits.head(5).to_dict("records"):
            member = lookup(my_members, record.get("member_id"))
            with st.container(border=True):
                name_col, amount_col = st.columns([3, 2])
                name_col.markdown(f"**{display_name(member)}**")
                name_col.caption(
                    format_date(record.get("created_at"), with_year=False, timezone=ctx.config.display_timezone)
                )
                amount_col.markdown(format_currency(record.get("amount")))
                amount_col.markdown(status_label(DEPOSIT_STATUS_LABELS, record.get("status")))


def contact_label(account: dict) -> str:
    """Phone when known, then email, then a generic label."""

    return display_text(account.get("phone"), fallback=display_text(account.get("email"), fallback="User"))


def render_customer(*, ctx: PageContext) -> None:
    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members()

    if render_query_error(members, data_access=ctx.data, retry_prefix=("/api/members",), key="beranda"):
        return

    account = lookup(members.data, ctx.user.id) or {}
    header, refresh = st.columns([5, 1])
    header.markdown(f"### {initial_of(account.get('name'), fallback='U')} · {contact_label(account)}")
    header.caption(display_text(account.get("email"), fallback=""))
    if refresh.button("Muat ulang", icon=":material/refresh:", key="beranda-refresh", help="Muat ulang saldo"):
        ctx.data.refresh(("/api/members",))
        st.rerun()

    with st.container(border=True):
        st.caption("Informasi Saldo")
        st.markdown(f"## {format_currency(account.get('balance', 0))}")
        score = account.get("credit_score")
        st.markdown(f":blue-background[Kredit skor {int(score) if score is not None else 100}]")
        st.caption("Pastikan melakukan refresh")

    base = PANEL_PATHS["customer"]
    st.subheader("Aksi Cepat")
    actions = [
        ("Deposit Saldo", "Tambah saldo ke akun", ":material/account_balance_wallet:", f"{base}/deposit"),
        ("Riwayat", "Riwayat deposit dan penarikan", ":material/history:", f"{base}/history"),
        ("Notifikasi", "Pesan dan pemberitahuan", ":material/notifications:", f"{base}/notifications"),
    ]
    for title, description, icon, path in actions:
        with st.container(border=True):
            text_col, button_col = st.columns([4, 1])
            text_col.markdown(f"**{title}**")
            text_col.caption(description)
            if button_col.button("Buka", icon=icon, key=f"action-{path}"):
                navigate(path)
