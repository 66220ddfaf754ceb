# This file renders the agent commission page.
# It exists so agents can see monthly commission earned on their customers' approved deposits.
# The monthly aggregation is a pure pandas helper shared with the agent dashboard.
# Months use the processing timestamp when present and fall back to the request timestamp.

from __future__ import annotations

from typing import Final
from zoneinfo import ZoneInfo

import pandas as pd
import streamlit as st

from src.portal.components.charts import render_commission_chart
from src.portal.components.record_list import loading_rows, render_empty, render_query_error
from src.portal.components.summary_cards import MetricCard, render_metric_cards
from src.portal.formatting import DEFAULT_TIMEZONE, format_count, format_currency, format_percent
from src.portal.list_filters import owned_by, records_for_members
from src.portal.page_context import PageContext
from src.portal.tooltips import TOOLTIPS

MONTHS_LONG: Final[tuple[str, ...]] = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)

COMMISSION_COLUMNS: Final[list[str]] = ["month", "month_label", "amount", "commission", "transactions"]


def monthly_commission(
    deposits: pd.DataFrame,
    *,
    rate_percent: float,
    timezone: str = DEFAULT_TIMEZONE,
) -> pd.DataFrame:
    """Aggregate approved deposits per calendar month, newest month first."""

    approved = deposits[deposits["status"] == "approved"] if not deposits.empty else deposits
    if approved.empty:
        return pd.DataFrame(columns=COMMISSION_COLUMNS)

    booked_at = approved["processed_at"].fillna(approved["created_at"])
    local = pd.to_datetime(booked_at, utc=True, errors="coerce").dt.tz_convert(ZoneInfo(timezone))
    frame = pd.DataFrame(
        {
            "year": local.dt.year,
            "month_number": local.dt.month,
            "amount": approved["amount"].fillna(0).astype(float),
        }
    ).dropna(subset=["year", "month_number"])
    if frame.empty:
        return pd.DataFrame(columns=COMMISSION_COLUMNS)

    grouped = (
        frame.groupby(["year", "month_number"])
        .agg(amount=("amount", "sum"), transactions=("amount", "size"))
        .reset_index()
        .sort_values(["year", "month_number"], ascending=False)
    )
    grouped["month"] = grouped.apply(
        lambda row: f"{int(row['year']):04d}-{int(row['month_number']):02d}", axis=1
    )
    grouped["month_label"] = grouped.apply(
        lambda row: f"{MONTHS_LONG[int(row['month_number']) - 1]} {int(row['year'])}", axis=1
    )
    grouped["commission"] = (grouped["amount"] * rate_percent / 100).round()
    grouped["transactions"] = grouped["transactions"].astype(int)
    return grouped[COMMISSION_COLUMNS].reset_index(drop=True)


def current_month_commission(
    history: pd.DataFrame,
    *,
    timezone: str = DEFAULT_TIMEZONE,
    now: pd.Timestamp | None = None,
) -> float:
    if history.empty:
        return 0.0
    moment = now if now is not None else pd.Timestamp.now(tz="UTC")
    month_key = moment.tz_convert(ZoneInfo(timezone)).strftime("%Y-%m")
    return float(history.loc[history["month"] == month_key, "commission"].sum())


def render(*, ctx: PageContext) -> None:
    st.header("Komisi Saya")
    st.caption("Lihat riwayat dan total komisi Anda")

    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members(agent_id=ctx.user.id)
        deposits = ctx.data.deposits(agent_id=ctx.user.id)

    for result, prefix, key in (
        (members, ("/api/members",), "commission-members"),
        (deposits, ("/api/deposits",), "commission-deposits"),
    ):
        if render_query_error(result, data_access=ctx.data, retry_prefix=prefix, key=key):
            return

    my_members = owned_by(members.data, "assigned_agent_id", ctx.user.id)
    my_deposits = records_for_members(deposits.data, my_members)
    history = monthly_commission(
        my_deposits,
        rate_percent=ctx.config.commission_rate_percent,
        timezone=ctx.config.display_timezone,
    )

    latest = current_month_commission(history, timezone=ctx.config.display_timezone)
    render_metric_cards(
        [
            MetricCard("Komisi Bulan Ini", format_currency(latest), TOOLTIPS["commission_month_card"]),
            MetricCard(
                "Total Komisi",
                format_currency(history["commission"].sum() if not history.empty else 0),
                TOOLTIPS["commission_total_card"],
            ),
            MetricCard(
                "Persentase Komisi",
                format_percent(ctx.config.commission_rate_percent),
                TOOLTIPS["commission_rate_card"],
            ),
        ]
    )

    render_commission_chart(history.iloc[::-1], help_text=TOOLTIPS["commission_chart"])

    st.subheader("Riwayat Komisi Bulanan")
    st.caption("Komisi dihitung berdasarkan transaksi pelanggan Anda")
    if history.empty:
        render_empty("Belum ada komisi", "Komisi muncul setelah deposit pelanggan disetujui")
        return
    for record in history.to_dict("records"):
        with st.container(border=True):
            month_col, amount_col = st.columns([3, 2])
            month_col.markdown(f"**{record['month_label']}**")
            month_col.caption(f"{format_count(record['transactions'])} transaksi")
            amount_col.markdown(f":green[+{format_currency(record['commission'])}]")
            amount_col.caption(f"dari deposit {format_currency(record['amount'])}")
