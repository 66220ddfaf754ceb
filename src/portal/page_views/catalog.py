# This file renders the product catalog, the customer mall, and the system bank accounts.
# It exists so staff tables and the customer mall read the same product snapshot.
# Ratings arrive in tenths and prices in whole rupiah; both go through the shared formatters.

from __future__ import annotations

from typing import Any

import streamlit as st

from src.portal.components.record_list import loading_rows, render_data_view, render_query_error
from src.portal.components.tables import render_table
from src.portal.data_view import DataView
from src.portal.formatting import display_text, format_count, format_currency, format_date, format_rating
from src.portal.list_filters import search_records
from src.portal.page_context import PageContext
from src.portal.ui_text import MALL_CATEGORIES

PRODUCT_TABLE_COLUMNS = {
    "name": "Produk",
    "category": "Kategori",
    "price": "Harga",
    "rating": "Rating",
    "reviews": "Ulasan",
    "is_active": "Aktif",
}

BANK_TABLE_COLUMNS = {
    "bank_name": "Bank",
    "account_number": "No. Rekening",
    "account_name": "Atas Nama",
    "is_active": "Aktif",
    "created_at": "Ditambahkan",
}

MALL_VIEW = DataView(
    key="mall",
    title="Mall",
    search_fields=("name",),
    search_placeholder="Cari produk...",
    category_field="category",
    categories=MALL_CATEGORIES,
    empty_title="Produk tidak ditemukan",
    empty_message="Coba kata kunci atau kategori lain.",
)


def _yes_no(value: Any) -> str:
    return "Ya" if value else "Tidak"


def render_products(*, ctx: PageContext) -> None:
    st.header("Products")
    st.caption("Katalog produk yang tampil di Mall")

    with loading_rows(ctx.config.skeleton_rows):
        products = ctx.data.products(active_only=False)
    if render_query_error(products, data_access=ctx.data, retry_prefix=("/api/products",), key="products"):
        return

    query = st.text_input(
        "Cari produk",
        key="products-search",
        placeholder="Cari nama atau kategori...",
        label_visibility="collapsed",
    )
    rows = search_records(products.data, query, ("name", "category"))
    render_table(
        rows,
        title="Produk",
        columns=PRODUCT_TABLE_COLUMNS,
        empty_message="Tidak ada produk yang cocok.",
        formatters={
            "price": format_currency,
            "rating": format_rating,
            "reviews": format_count,
            "is_active": _yes_no,
        },
    )


def _product_card(record: dict[str, Any]) -> None:
    image_url = record.get("image_url")
    if isinstance(image_url, str) and image_url:
        st.image(image_url, use_container_width=True)
    st.markdown(f"**{display_text(record.get('name'))}**")
    st.caption(display_text(record.get("category")))
    price_col, rating_col = st.columns(2)
    price_col.markdown(f":red[**{format_currency(record.get('price'))}**]")
    rating_col.caption(
        f":material/star: {format_rating(record.get('rating'))} ({format_count(record.get('reviews'))})"
    )


def render_mall(*, ctx: PageContext) -> None:
    with loading_rows(ctx.config.skeleton_rows):
        products = ctx.data.products(active_only=True)

    render_data_view(
        MALL_VIEW,
        products,
        data_access=ctx.data,
        retry_prefix=("/api/products/active",),
        row_renderer=_product_card,
    )


def bank_card(record: dict[str, Any]) -> None:
    st.markdown(f"**{display_text(record.get('bank_name'))}**")
    st.code(display_text(record.get("account_number")), language=None)
    st.caption(f"a.n. {display_text(record.get('account_name'))}")


def render_system_banks(*, ctx: PageContext) -> None:
    st.header("System Banks")
    st.caption("Rekening tujuan deposit anggota")

    with loading_rows(ctx.config.skeleton_rows):
        banks = ctx.data.system_banks(active_only=False)
    if render_query_error(banks, data_access=ctx.data, retry_prefix=("/api/system-banks",), key="system-banks"):
        return

    render_table(
        banks.data,
        title="Rekening",
        columns=BANK_TABLE_COLUMNS,
        empty_message="Belum ada rekening sistem.",
        formatters={
            "is_active": _yes_no,
            "created_at": lambda value: format_date(value, timezone=ctx.config.display_timezone),
        },
        height=280,
    )
