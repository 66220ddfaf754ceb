# This file maps each role's page slugs to their renderers.
# It exists so the app dispatches on (role, path) without a chain of conditionals.
# A path outside the role's panel base resolves to None; an unknown slug under the base is a not-found page.

from __future__ import annotations

from collections.abc import Callable

from src.portal.navigation import page_slug
from src.portal.page_views import account, activity, catalog, commission, dashboards, members, staff, transfers

PageRenderer = Callable[..., None]

ROUTES: dict[str, dict[str, PageRenderer]] = {
    "master": {
        "": dashboards.render_master,
        "admins": staff.render_admins,
        "agents": staff.render_agents,
        "members": members.render_members,
        "products": catalog.render_products,
        "system-banks": catalog.render_system_banks,
        "activities": activity.render_activities,
    },
    "admin": {
        "": dashboards.render_admin,
        "agents": staff.render_agents,
        "members": members.render_members,
        "member-approval": members.render_member_approval,
        "deposit-approval": transfers.render_deposit_approval,
        "withdrawal-approval": transfers.render_withdrawal_approval,
        "balance": members.render_balance,
        "products": catalog.render_products,
        "system-banks": catalog.render_system_banks,
        "account-lock": members.render_account_lock,
        "withdrawal-detection": transfers.render_withdrawal_detection,
    },
    "agent": {
        "": dashboards.render_agent,
        "customers": members.render_agent_customers,
        "member-approval": members.render_member_approval,
        "deposit-approval": transfers.render_deposit_approval,
        "withdrawal-approval": transfers.render_withdrawal_approval,
        "balance": members.render_balance,
        "deposits": transfers.render_agent_deposits,
        "commission": commission.render,
        "products": catalog.render_products,
        "system-banks": catalog.render_system_banks,
    },
    "customer": {
        "": dashboards.render_customer,
        "mall": catalog.render_mall,
        "aturan": account.render_aturan,
        "akun": account.render_akun,
        "profile": account.render_profile,
        "bank": account.render_bank,
        "balance": account.render_balance,
        "deposit": transfers.render_customer_deposit,
        "history": transfers.render_customer_history,
        "notifications": activity.render_notifications,
    },
}


class RouteNotFound(LookupError):
    """Raised when a path under the role's panel has no registered page."""


def resolve(role: str, path: str) -> PageRenderer | None:
    """Return the renderer for the path, None when the path belongs to another panel."""

    slug = page_slug(role, path)
    if slug is None:
        return None
    try:
        return ROUTES[role][slug]
    except KeyError as exc:
        raise RouteNotFound(path) from exc
