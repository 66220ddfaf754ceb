# This file renders rows of KPI cards used on the role dashboards.
# It exists so key figures share one visual and tooltip pattern across panels.
# The function expects display-ready strings and does not perform computation.

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st


@dataclass(frozen=True)
class MetricCard:
    label: str
    value: str
    help_text: str | None = None


def render_metric_cards(cards: list[MetricCard]) -> None:
    if not cards:
        return
    columns = st.columns(len(cards))
    for column, card in zip(columns, cards):
        column.metric(card.label, card.value, help=card.help_text, border=True)
