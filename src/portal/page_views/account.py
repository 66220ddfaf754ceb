# This file renders the customer account pages: rules, account overview, profile, and bank details.
# It exists so the customer's own member record is shown in one consistent layout.
# The member record is looked up by the session user id in the members snapshot.

from __future__ import annotations

from typing import Any

import streamlit as st

from src.portal.components.nav_shell import navigate, sign_out
from src.portal.components.record_list import loading_rows, render_empty, render_query_error
from src.portal.formatting import display_text, format_currency, initial_of
from src.portal.list_filters import lookup
from src.portal.page_context import PageContext
from src.portal.portal_config import PANEL_PATHS
from src.portal.ui_text import MEMBER_STATUS_LABELS, RULES, status_label

PROFILE_FIELDS: tuple[tuple[str, str], ...] = (
    ("No. Telepon", "phone"),
    ("Email", "email"),
    ("Nama Lengkap", "name"),
    ("Total Penghasilan", "balance"),
    ("Status", "status"),
)

BANK_FIELDS: tuple[tuple[str, str], ...] = (
    ("Nama Bank", "bank_name"),
    ("No. Rekening", "bank_account_number"),
    ("Atas Nama", "bank_account_name"),
)

ACCOUNT_MENU: tuple[tuple[str, str, str], ...] = (
    ("Info", ":material/person:", "profile"),
    ("Deposit", ":material/arrow_circle_down:", "deposit"),
    ("Saldo", ":material/account_balance_wallet:", "balance"),
    ("Bank", ":material/account_balance:", "bank"),
    ("Riwayat", ":material/history:", "history"),
    ("Notifikasi", ":material/chat:", "notifications"),
)


def profile_value(account: dict[str, Any] | None, field: str) -> str:
    if not account:
        return "-"
    value = account.get(field)
    if field == "balance":
        return format_currency(value if value is not None else 0)
    if field == "status":
        return status_label(MEMBER_STATUS_LABELS, value)
    return display_text(value)


def _my_account(ctx: PageContext, key: str) -> dict[str, Any] | None:
    with loading_rows(ctx.config.skeleton_rows):
        members = ctx.data.members()
    if render_query_error(members, data_access=ctx.data, retry_prefix=("/api/members",), key=key):
        return None
    account = lookup(members.data, ctx.user.id)
    if account is None:
        render_empty("Data akun tidak ditemukan", "Hubungi agent Anda untuk bantuan.")
    return account


def render_aturan(*, ctx: PageContext) -> None:
    st.header("Aturan")
    for title, items in RULES:
        with st.container(border=True):
            st.markdown(f"**{title}**")
            for item in items:
                st.markdown(f"- {item}")


def render_akun(*, ctx: PageContext) -> None:
    account = _my_account(ctx, "akun")
    if account is None:
        return

    with st.container(border=True):
        avatar_col, text_col = st.columns([1, 5])
        avatar_col.markdown(f"## {initial_of(account.get('name'), fallback='U')}")
        text_col.markdown(f"**{display_text(account.get('phone'), fallback='User')}**")
        text_col.caption(display_text(account.get("email")))
        score = account.get("credit_score")
        text_col.markdown(f":blue-background[Kredit skor {int(score) if score is not None else 100}]")

    base = PANEL_PATHS["customer"]
    columns = st.columns(len(ACCOUNT_MENU))
    for column, (label, icon, slug) in zip(columns, ACCOUNT_MENU):
        if column.button(label, icon=icon, key=f"akun-menu-{slug}", use_container_width=True):
            navigate(f"{base}/{slug}")

    _render_fields(account, PROFILE_FIELDS)

    if st.button("Keluar", icon=":material/logout:", key="akun-logout", type="secondary"):
        sign_out()


def _render_fields(account: dict[str, Any], fields: tuple[tuple[str, str], ...]) -> None:
    with st.container(border=True):
        for label, field in fields:
            label_col, value_col = st.columns([2, 3])
            label_col.caption(label)
            value_col.markdown(profile_value(account, field))


def render_profile(*, ctx: PageContext) -> None:
    st.header("Info Akun")
    account = _my_account(ctx, "profile")
    if account is None:
        return
    _render_fields(account, PROFILE_FIELDS)


def render_bank(*, ctx: PageContext) -> None:
    st.header("Rekening Bank")
    account = _my_account(ctx, "bank")
    if account is None:
        return
    if not display_text(account.get("bank_account_number"), fallback=""):
        render_empty("Belum ada rekening", "Hubungi agent Anda untuk menambahkan rekening bank.")
        return
    _render_fields(account, BANK_FIELDS)


def account_status_rows(account: dict[str, Any]) -> list[tuple[str, str]]:
    return [
        ("Status Akun", ":red[Terkunci]" if account.get("is_locked") else ":green[Aktif]"),
        ("Status Penarikan", ":red[Dikunci]" if account.get("withdrawal_locked") else ":green[Tersedia]"),
        ("Email", display_text(account.get("email"))),
    ]


def render_balance(*, ctx: PageContext) -> None:
    st.header("Saldo Saya")
    account = _my_account(ctx, "saldo")
    if account is None:
        return

    with st.container(border=True):
        st.caption("Saldo Tersedia")
        st.markdown(f"## {format_currency(account.get('balance', 0))}")

    base = PANEL_PATHS["customer"]
    if st.button("Deposit", icon=":material/arrow_circle_down:", key="saldo-deposit", help="Tambah saldo ke akun Anda"):
        navigate(f"{base}/deposit")

    with st.container(border=True):
        for label, value in account_status_rows(account):
            label_col, value_col = st.columns([2, 3])
            label_col.caption(label)
            value_col.markdown(value)
