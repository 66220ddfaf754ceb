# This file renders any DataView: search box, category chips, error and empty states, and row cards.
# It exists so list pages only declare what to show and how one row looks.
# Failed queries get an inline retry that invalidates the failing cache key before rerunning.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import pandas as pd
import streamlit as st

from src.portal.data_access import PortalDataAccess, QueryResult
from src.portal.data_view import DataView, RowRenderer
from src.portal.query_cache import CacheKey
from src.portal.ui_text import LOADING, QUERY_FAILED, RETRY


def render_query_error(
    result: QueryResult,
    *,
    data_access: PortalDataAccess,
    retry_prefix: CacheKey,
    key: str,
) -> bool:
    if not result.is_error:
        return False
    st.error(f"{QUERY_FAILED} {result.error}")
    if st.button(RETRY, key=f"retry-{key}", icon=":material/refresh:"):
        data_access.refresh(retry_prefix)
        st.rerun()
    return True


@contextmanager
def loading_rows(count: int) -> Iterator[None]:
    """Show bordered placeholder rows while the wrapped block loads data."""

    placeholder = st.empty()
    with placeholder.container():
        st.caption(LOADING)
        for _ in range(count):
            st.container(border=True, height=64)
    try:
        yield
    finally:
        placeholder.empty()


def render_empty(title: str, message: str = "") -> None:
    body = f"**{title}**"
    if message:
        body = f"{body}  \n{message}"
    st.info(body)


def render_data_view(
    view: DataView,
    result: QueryResult,
    *,
    data_access: PortalDataAccess,
    retry_prefix: CacheKey,
    owner_id: str | None = None,
    row_renderer: RowRenderer | None = None,
) -> pd.DataFrame:
    st.subheader(view.title)
    if view.subtitle:
        st.caption(view.subtitle)

    if render_query_error(result, data_access=data_access, retry_prefix=retry_prefix, key=view.key):
        return result.data

    query = ""
    if view.searchable:
        query = st.text_input(
            view.search_placeholder,
            key=f"{view.key}-search",
            placeholder=view.search_placeholder,
            label_visibility="collapsed",
        )

    category = None
    if view.categories:
        category = st.pills(
            "Kategori",
            options=list(view.categories),
            default=view.categories[0],
            key=f"{view.key}-category",
            label_visibility="collapsed",
        )

    rows = view.apply(result.data, query=query, category=category, owner_id=owner_id)
    if rows.empty:
        render_empty(view.empty_title, view.empty_message)
        return rows

    if row_renderer is None:
        st.dataframe(rows, use_container_width=True, hide_index=True)
        return rows

    for record in rows.to_dict("records"):
        with st.container(border=True):
            row_renderer(record)
    return rows
