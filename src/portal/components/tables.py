# This file renders record tables for staff pages that list many rows at once.
# It exists so column selection, display formatting, and empty states are handled the same way everywhere.
# Callers pass raw entity frames plus a label mapping; formatting happens on a copy.

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pandas as pd
import streamlit as st


def prepare_table(
    dataframe: pd.DataFrame,
    *,
    columns: dict[str, str],
    formatters: dict[str, Callable[[Any], str]] | None = None,
) -> pd.DataFrame:
    """Select, format, and relabel columns for display."""

    existing = [column for column in columns if column in dataframe.columns]
    table = dataframe[existing].copy()
    for column, formatter in (formatters or {}).items():
        if column in table.columns:
            table[column] = table[column].map(formatter)
    return table.rename(columns=columns)


def render_table(
    dataframe: pd.DataFrame,
    *,
    title: str,
    columns: dict[str, str],
    empty_message: str,
    formatters: dict[str, Callable[[Any], str]] | None = None,
    help_text: str | None = None,
    height: int = 360,
) -> None:
    st.subheader(f"{title} ({len(dataframe)})", help=help_text)
    if dataframe.empty:
        st.info(empty_message)
        return
    table = prepare_table(dataframe, columns=columns, formatters=formatters)
    st.dataframe(table, use_container_width=True, hide_index=True, height=height)
