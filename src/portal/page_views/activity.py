# This file renders the activity log and member notifications.
# It exists so staff can audit actions and customers can read their own messages.
# Notifications are fetched per member; unread counts come from the is_read flag.

from __future__ import annotations

from typing import Any

import pandas as pd
import streamlit as st

from src.portal.components.record_list import loading_rows, render_data_view
from src.portal.components.summary_cards import MetricCard, render_metric_cards
from src.portal.data_view import DataView
from src.portal.formatting import display_name, display_text, format_count, format_date
from src.portal.list_filters import count_where, lookup
from src.portal.page_context import PageContext
from src.portal.tooltips import TOOLTIPS
from src.portal.ui_text import NOTIFICATION_ICONS, ROLE_LABELS, status_label

ACTIVITY_VIEW = DataView(
    key="activities",
    title="Log Aktivitas",
    subtitle="Seluruh aktivitas admin, agent, dan anggota",
    search_fields=("action", "description"),
    search_placeholder="Cari aktivitas...",
    empty_title="Tidak ada aktivitas",
    empty_message="Aktivitas yang cocok akan muncul di sini.",
)


def _activity_row(ctx: PageContext, members: pd.DataFrame):
    def render_row(record: dict[str, Any]) -> None:
        text_col, meta_col = st.columns([4, 2])
        role = record.get("user_role")
        badge = f" {status_label(ROLE_LABELS, role)}" if isinstance(role, str) and role else ""
        text_col.markdown(f"**{display_text(record.get('action'))}**{badge}")
        text_col.caption(display_text(record.get("description")))
        member = lookup(members, record.get("member_id"))
        if member is not None:
            text_col.caption(f"Anggota: {display_name(member)}")
        meta_col.caption(display_text(record.get("user_name"), fallback="Sistem"))
        meta_col.caption(format_date(record.get("created_at"), timezone=ctx.config.display_timezone))

    return render_row


def render_activities(*, ctx: PageContext) -> None:
    st.header("Activities")

    with loading_rows(ctx.config.skeleton_rows):
        activities = ctx.data.activities()
        members = ctx.data.members()

    render_data_view(
        ACTIVITY_VIEW,
        activities,
        data_access=ctx.data,
        retry_prefix=("/api/activities",),
        row_renderer=_activity_row(ctx, members.data),
    )


def _notification_row(ctx: PageContext):
    def render_row(record: dict[str, Any]) -> None:
        icon = NOTIFICATION_ICONS.get(record.get("type") or "info", NOTIFICATION_ICONS["info"])
        title = display_text(record.get("title"))
        if not record.get("is_read"):
            title = f"{title} :blue-badge[Baru]"
        st.markdown(f"{icon} **{title}**")
        st.write(display_text(record.get("message"), fallback=""))
        st.caption(format_date(record.get("created_at"), timezone=ctx.config.display_timezone))

    return render_row


def render_notifications(*, ctx: PageContext) -> None:
    st.header("Notifikasi")

    with loading_rows(ctx.config.skeleton_rows):
        notifications = ctx.data.notifications(member_id=ctx.user.id)

    unread = len(notifications.data) - count_where(notifications.data, "is_read", True)
    render_metric_cards(
        [
            MetricCard("Belum Dibaca", format_count(unread), TOOLTIPS["unread_notifications_card"]),
            MetricCard("Total", format_count(len(notifications.data))),
        ]
    )

    view = DataView(
        key="notifications",
        title="Pesan",
        owner_field="member_id",
        empty_title="Belum ada notifikasi",
        empty_message="Pemberitahuan dari admin akan muncul di sini.",
    )
    render_data_view(
        view,
        notifications,
        data_access=ctx.data,
        retry_prefix=("/api/notifications",),
        owner_id=ctx.user.id,
        row_renderer=_notification_row(ctx),
    )
