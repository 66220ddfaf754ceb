# This test file verifies that every navigation entry resolves to a page renderer.
# It exists so a shell entry can never lead to the not-found page and foreign panels are rejected.

from __future__ import annotations

import pytest

from src.portal.navigation import AGENT_SHELL, SHELLS
from src.portal.page_views import account, catalog, members, transfers
from src.portal.portal_config import PANEL_PATHS
from src.portal.routes import ROUTES, RouteNotFound, resolve


@pytest.mark.parametrize("role", sorted(SHELLS))
def test_every_shell_entry_has_a_route(role: str) -> None:
    for path in SHELLS[role].paths():
        assert callable(resolve(role, path))


def test_customer_quick_links_resolve() -> None:
    base = PANEL_PATHS["customer"]

    assert resolve("customer", f"{base}/deposit") is transfers.render_customer_deposit
    assert resolve("customer", f"{base}/history") is transfers.render_customer_history
    assert resolve("customer", f"{base}/bank") is account.render_bank
    assert resolve("customer", f"{base}/balance") is account.render_balance
    assert resolve("customer", f"{base}/mall") is catalog.render_mall


def test_foreign_panel_path_resolves_to_none() -> None:
    assert resolve("customer", f"{PANEL_PATHS['master']}/admins") is None
    assert resolve("agent", "/") is None


def test_unknown_page_under_own_panel_raises() -> None:
    with pytest.raises(RouteNotFound):
        resolve("agent", f"{PANEL_PATHS['agent']}/admins")


def test_routes_cover_every_role() -> None:
    assert set(ROUTES) == set(PANEL_PATHS)
    assert all("" in pages for pages in ROUTES.values())


def test_agent_shell_includes_member_approval_and_balance() -> None:
    base = PANEL_PATHS["agent"]
    labels = [item.label for item in AGENT_SHELL.items]

    assert "Member Approval" in labels
    assert "Balance" in labels
    assert resolve("agent", f"{base}/member-approval") is members.render_member_approval
    assert resolve("agent", f"{base}/balance") is members.render_balance
