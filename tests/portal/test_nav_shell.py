# This test file verifies the session side effects of navigation and sign-out.
# It exists so signing out never leaves a stale page path in the URL for the next sign-in.
# A namespace stands in for the streamlit module so no script runner is needed.

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from src.portal.components import nav_shell
from src.portal.session import PATH_KEY, SESSION_KEY


def _fake_streamlit(state: dict[str, Any], params: dict[str, str], reruns: list[bool]) -> SimpleNamespace:
    return SimpleNamespace(session_state=state, query_params=params, rerun=lambda: reruns.append(True))


def test_sign_out_clears_session_and_url_path(monkeypatch: pytest.MonkeyPatch) -> None:
    state: dict[str, Any] = {
        SESSION_KEY: {"id": "c-1", "name": "Ani", "email": "ani@example.com", "role": "customer"},
        PATH_KEY: "/wk-panel-2210/akun",
    }
    params = {"path": "/wk-panel-2210/akun"}
    reruns: list[bool] = []
    monkeypatch.setattr(nav_shell, "st", _fake_streamlit(state, params, reruns))

    nav_shell.sign_out()

    assert state == {}
    assert params == {}
    assert reruns == [True]


def test_navigate_stores_path_in_state_and_url(monkeypatch: pytest.MonkeyPatch) -> None:
    state: dict[str, Any] = {}
    params: dict[str, str] = {}
    reruns: list[bool] = []
    monkeypatch.setattr(nav_shell, "st", _fake_streamlit(state, params, reruns))

    nav_shell.navigate("/wk-panel-2210/mall")

    assert state[PATH_KEY] == "/wk-panel-2210/mall"
    assert params == {"path": "/wk-panel-2210/mall"}
    assert reruns == [True]
