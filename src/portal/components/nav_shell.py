# This file renders the role navigation shells: staff sidebars and the customer bottom bar.
# It exists so every panel highlights the current page the same way, by exact path equality.
# Clicking an entry stores the new path in session state and the URL, then reruns the script.
# Signing out clears both so the next sign-in starts from the role home page.

from __future__ import annotations

import streamlit as st

from src.portal.navigation import NavShell, is_active
from src.portal.session import PATH_KEY, logout


def navigate(path: str) -> None:
    st.session_state[PATH_KEY] = path
    st.query_params["path"] = path
    st.rerun()


def sign_out() -> None:
    logout(st.session_state)
    st.query_params.clear()
    st.rerun()


def render_sidebar_shell(shell: NavShell, *, current_path: str) -> None:
    st.sidebar.header(shell.title)
    st.sidebar.caption("Menu")
    for item in shell.items:
        clicked = st.sidebar.button(
            item.label,
            icon=item.icon,
            key=f"nav-{item.path}",
            type="primary" if is_active(item, current_path) else "secondary",
            use_container_width=True,
        )
        if clicked:
            navigate(item.path)


def render_bottom_nav(shell: NavShell, *, current_path: str) -> None:
    st.divider()
    columns = st.columns(len(shell.items))
    for column, item in zip(columns, shell.items):
        clicked = column.button(
            item.label,
            icon=item.icon,
            key=f"nav-{item.path}",
            type="primary" if is_active(item, current_path) else "tertiary",
            use_container_width=True,
        )
        if clicked:
            navigate(item.path)
