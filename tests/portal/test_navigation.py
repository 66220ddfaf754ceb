# This test file verifies the role navigation shells and active-entry highlighting.
# It exists so exactly one entry is highlighted for paths inside a shell and none otherwise.

from __future__ import annotations

import pytest

from src.portal.navigation import (
    CUSTOMER_SHELL,
    SHELLS,
    active_item,
    home_path,
    is_active,
    page_slug,
    shell_for_role,
)
from src.portal.portal_config import PANEL_PATHS, ROLES


@pytest.mark.parametrize("role", ROLES)
def test_each_shell_path_highlights_exactly_one_entry(role: str) -> None:
    shell = shell_for_role(role)
    for path in shell.paths():
        active = [item for item in shell.items if is_active(item, path)]
        assert len(active) == 1
        assert active[0].path == path


@pytest.mark.parametrize("role", ROLES)
def test_foreign_path_highlights_nothing(role: str) -> None:
    shell = shell_for_role(role)
    other = next(base for other_role, base in PANEL_PATHS.items() if other_role != role)

    assert active_item(shell, f"{other}/") is None
    assert active_item(shell, f"{PANEL_PATHS[role]}/unknown-page") is None


def test_shells_start_at_role_home() -> None:
    for role, shell in SHELLS.items():
        assert shell.items[0].path == home_path(role)
        assert all(path.startswith(PANEL_PATHS[role]) for path in shell.paths())


def test_customer_shell_is_bottom_bar() -> None:
    assert CUSTOMER_SHELL.layout == "bottom"
    assert [item.label for item in CUSTOMER_SHELL.items] == ["Beranda", "Mall", "Aturan", "Akun"]


def test_unknown_role_raises() -> None:
    with pytest.raises(ValueError, match="Unknown portal role"):
        shell_for_role("guest")


def test_page_slug() -> None:
    base = PANEL_PATHS["agent"]
    assert page_slug("agent", base) == ""
    assert page_slug("agent", f"{base}/") == ""
    assert page_slug("agent", f"{base}/commission") == "commission"
    assert page_slug("agent", f"{PANEL_PATHS['admin']}/members") is None
    assert page_slug("agent", f"{base}-evil/commission") is None
