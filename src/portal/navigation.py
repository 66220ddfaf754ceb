# This file declares the role-scoped navigation shells of the portal.
# It exists so the sidebars, the customer bottom bar, and the router share one ordered list of entries.
# Highlighting is plain string equality between an entry path and the current path.
# Every entry is shown regardless of permissions; route guarding happens in session.py.

from __future__ import annotations

from dataclasses import dataclass

from src.portal.portal_config import PANEL_PATHS


@dataclass(frozen=True)
class NavItem:
    label: str
    icon: str
    path: str


@dataclass(frozen=True)
class NavShell:
    role: str
    title: str
    layout: str
    items: tuple[NavItem, ...]

    def paths(self) -> list[str]:
        return [item.path for item in self.items]


def _items(role: str, entries: list[tuple[str, str, str]]) -> tuple[NavItem, ...]:
    base = PANEL_PATHS[role]
    return tuple(NavItem(label=label, icon=icon, path=f"{base}/{slug}") for label, icon, slug in entries)


MASTER_SHELL = NavShell(
    role="master",
    title="Master Panel",
    layout="sidebar",
    items=_items(
        "master",
        [
            ("Dashboard", ":material/dashboard:", ""),
            ("Admins", ":material/manage_accounts:", "admins"),
            ("Agents", ":material/manage_accounts:", "agents"),
            ("Members", ":material/group:", "members"),
            ("Products", ":material/inventory_2:", "products"),
            ("System Banks", ":material/account_balance:", "system-banks"),
            ("Activities", ":material/monitoring:", "activities"),
        ],
    ),
)

ADMIN_SHELL = NavShell(
    role="admin",
    title="Admin Panel",
    layout="sidebar",
    items=_items(
        "admin",
        [
            ("Dashboard", ":material/dashboard:", ""),
            ("Agents", ":material/manage_accounts:", "agents"),
            ("Members", ":material/group:", "members"),
            ("Member Approval", ":material/how_to_reg:", "member-approval"),
            ("Deposit Approval", ":material/arrow_circle_up:", "deposit-approval"),
            ("Withdrawal Approval", ":material/account_balance_wallet:", "withdrawal-approval"),
            ("Balance", ":material/account_balance_wallet:", "balance"),
            ("Products", ":material/inventory_2:", "products"),
            ("System Banks", ":material/account_balance:", "system-banks"),
            ("Account Lock", ":material/lock:", "account-lock"),
            ("Withdrawal Detection", ":material/error:", "withdrawal-detection"),
        ],
    ),
)

AGENT_SHELL = NavShell(
    role="agent",
    title="Agent Panel",
    layout="sidebar",
    items=_items(
        "agent",
        [
            ("Dashboard", ":material/dashboard:", ""),
            ("Customers", ":material/group:", "customers"),
            ("Member Approval", ":material/how_to_reg:", "member-approval"),
            ("Deposit Approval", ":material/arrow_circle_up:", "deposit-approval"),
            ("Withdrawal Approval", ":material/account_balance_wallet:", "withdrawal-approval"),
            ("Balance", ":material/account_balance_wallet:", "balance"),
            ("Deposits", ":material/arrow_circle_down:", "deposits"),
            ("Commission", ":material/payments:", "commission"),
            ("Products", ":material/inventory_2:", "products"),
            ("System Banks", ":material/account_balance:", "system-banks"),
        ],
    ),
)

CUSTOMER_SHELL = NavShell(
    role="customer",
    title="Beranda",
    layout="bottom",
    items=_items(
        "customer",
        [
            ("Beranda", ":material/home:", ""),
            ("Mall", ":material/storefront:", "mall"),
            ("Aturan", ":material/description:", "aturan"),
            ("Akun", ":material/person:", "akun"),
        ],
    ),
)

SHELLS: dict[str, NavShell] = {
    shell.role: shell for shell in (MASTER_SHELL, ADMIN_SHELL, AGENT_SHELL, CUSTOMER_SHELL)
}


def shell_for_role(role: str) -> NavShell:
    try:
        return SHELLS[role]
    except KeyError as exc:
        raise ValueError(f"Unknown portal role: {role}") from exc


def home_path(role: str) -> str:
    return f"{PANEL_PATHS[role]}/"


def is_active(item: NavItem, current_path: str) -> bool:
    return item.path == current_path


def active_item(shell: NavShell, current_path: str) -> NavItem | None:
    for item in shell.items:
        if is_active(item, current_path):
            return item
    return None


def page_slug(role: str, path: str) -> str | None:
    """Return the page slug under the role's panel base, or None for foreign paths."""

    base = PANEL_PATHS[role]
    if path == base or path == f"{base}/":
        return ""
    if not path.startswith(f"{base}/"):
        return None
    return path[len(base) + 1 :].strip("/")
