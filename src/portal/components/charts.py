# This file contains the Altair charts used on dashboards and the commission page.
# It exists so chart encoding and empty-state handling are shared between panels.
# Amounts are plotted in rupiah; axis labels use the same Indonesian copy as the cards.

from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st


def render_commission_chart(dataframe: pd.DataFrame, *, help_text: str) -> None:
    st.subheader("Komisi per Bulan", help=help_text)
    if dataframe.empty:
        st.info("Belum ada komisi yang tercatat.")
        return

    chart = (
        alt.Chart(dataframe)
        .mark_bar()
        .encode(
            x=alt.X("month_label:N", sort=None, title="Bulan"),
            y=alt.Y("commission:Q", title="Komisi (Rp)"),
            tooltip=[
                alt.Tooltip("month_label:N", title="Bulan"),
                alt.Tooltip("commission:Q", title="Komisi", format=",.0f"),
                alt.Tooltip("transactions:Q", title="Transaksi"),
            ],
        )
        .properties(height=260)
    )
    st.altair_chart(chart, use_container_width=True)


def render_status_breakdown(dataframe: pd.DataFrame, *, title: str, help_text: str) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info("Belum ada transaksi.")
        return

    counts = dataframe.groupby("status", dropna=False).size().reset_index(name="count")
    chart = (
        alt.Chart(counts)
        .mark_bar()
        .encode(
            x=alt.X("status:N", title="Status"),
            y=alt.Y("count:Q", title="Jumlah"),
            color=alt.Color(
                "status:N",
                scale=alt.Scale(
                    domain=["pending", "approved", "rejected"],
                    range=["#f59e0b", "#16a34a", "#dc2626"],
                ),
                legend=None,
            ),
            tooltip=["status:N", "count:Q"],
        )
        .properties(height=240)
    )
    st.altair_chart(chart, use_container_width=True)


def render_balance_distribution(members: pd.DataFrame, *, help_text: str) -> None:
    st.subheader("Saldo Terbesar", help=help_text)
    if members.empty:
        st.info("Belum ada anggota.")
        return

    top = members.nlargest(10, "balance")[["name", "balance"]]
    chart = (
        alt.Chart(top)
        .mark_bar()
        .encode(
            x=alt.X("balance:Q", title="Saldo (Rp)"),
            y=alt.Y("name:N", sort="-x", title="Anggota"),
            tooltip=["name:N", alt.Tooltip("balance:Q", format=",.0f")],
        )
        .properties(height=280)
    )
    st.altair_chart(chart, use_container_width=True)
