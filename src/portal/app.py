# This file is the Streamlit entrypoint for the multi-role member portal.
# It exists to combine sign-in, the role navigation shell, and page dispatch in one app.
# Paths that belong to another role's panel redirect to the signed-in role's home page.
# Unknown pages under the role's own panel show a not-found screen instead of failing the rerun.

from __future__ import annotations

import streamlit as st

from src.common.logging import configure_logging
from src.portal.components.nav_shell import navigate, render_bottom_nav, render_sidebar_shell, sign_out
from src.portal.data_access import PortalDataAccess
from src.portal.formatting import display_text
from src.portal.navigation import home_path, shell_for_role
from src.portal.page_context import PageContext
from src.portal.portal_config import load_portal_config
from src.portal.routes import RouteNotFound, resolve
from src.portal.session import (
    PATH_KEY,
    SessionError,
    SessionUser,
    current_user,
    refresh_session,
    sign_in,
)
from src.portal.ui_text import (
    APP_TITLE,
    NOT_FOUND_MESSAGE,
    NOT_FOUND_TITLE,
    REFRESH_FAILED,
    REFRESH_OK,
    ROLE_LABELS,
    SIGN_IN_HELP,
    SIGN_IN_TITLE,
    status_label,
)


@st.cache_resource
def get_data_access() -> PortalDataAccess:
    config = load_portal_config()
    return PortalDataAccess(config=config)


def render_sign_in(data_access: PortalDataAccess) -> None:
    st.title(APP_TITLE)
    with st.form("sign-in"):
        st.subheader(SIGN_IN_TITLE)
        st.caption(SIGN_IN_HELP)
        email = st.text_input("Email", placeholder="nama@contoh.com")
        submitted = st.form_submit_button("Masuk", type="primary")
    if not submitted:
        return
    try:
        sign_in(st.session_state, data_access, email)
    except SessionError as exc:
        st.error(str(exc))
        return
    st.rerun()


def render_header(user: SessionUser, data_access: PortalDataAccess) -> None:
    title_col, refresh_col, logout_col = st.columns([6, 1, 1])
    title_col.markdown(f"**{display_text(user.name, fallback=user.email)}** {status_label(ROLE_LABELS, user.role)}")
    if refresh_col.button("Refresh", icon=":material/refresh:", key="session-refresh", help="Perbarui sesi"):
        if refresh_session(st.session_state, data_access):
            st.toast(REFRESH_OK)
        else:
            st.toast(REFRESH_FAILED)
            st.rerun()
    if logout_col.button("Keluar", icon=":material/logout:", key="session-logout"):
        sign_out()


def current_path(user: SessionUser) -> str:
    path = st.session_state.get(PATH_KEY) or st.query_params.get("path")
    return path or home_path(user.role)


def render_not_found(user: SessionUser) -> None:
    st.header(NOT_FOUND_TITLE)
    st.caption(NOT_FOUND_MESSAGE)
    if st.button("Kembali ke beranda", icon=":material/home:", key="not-found-home"):
        navigate(home_path(user.role))


def main() -> None:
    st.set_page_config(page_title=APP_TITLE, layout="wide")
    configure_logging()

    data_access = get_data_access()
    user = current_user(st.session_state)
    if user is None:
        render_sign_in(data_access)
        return

    path = current_path(user)
    try:
        renderer = resolve(user.role, path)
    except RouteNotFound:
        renderer = None
    else:
        if renderer is None:
            path = home_path(user.role)
            st.session_state[PATH_KEY] = path
            st.query_params["path"] = path
            renderer = resolve(user.role, path)

    render_header(user, data_access)
    shell = shell_for_role(user.role)
    if shell.layout == "sidebar":
        render_sidebar_shell(shell, current_path=path)

    ctx = PageContext(config=data_access.config, data=data_access, user=user, path=path)
    if renderer is None:
        render_not_found(user)
    else:
        renderer(ctx=ctx)

    if shell.layout == "bottom":
        render_bottom_nav(shell, current_path=path)


if __name__ == "__main__":
    main()
