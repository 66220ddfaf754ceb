# This file defines runtime configuration for the member portal.
# It exists so API settings, cache staleness, and display defaults can be tuned through environment variables.
# Panel base paths live here too because navigation shells and the router both depend on them.
# The dataclass keeps configuration explicit and easy to build in tests.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from dotenv import load_dotenv

ROLES: Final[tuple[str, ...]] = ("master", "admin", "agent", "customer")

PANEL_PATHS: Final[dict[str, str]] = {
    "master": "/ms-panel-9921",
    "admin": "/ad-panel-4432",
    "agent": "/ag-panel-7781",
    "customer": "/wk-panel-2210",
}


@dataclass(frozen=True)
class PortalConfig:
    api_base_url: str
    request_timeout_seconds: int = 8
    query_stale_seconds: int = 300
    display_timezone: str = "Asia/Jakarta"
    commission_rate_percent: int = 5
    recent_activity_limit: int = 10
    skeleton_rows: int = 3


def load_portal_config(*, load_env: bool = True) -> PortalConfig:
    if load_env:
        load_dotenv()

    api_base_url = os.getenv("PORTAL_API_BASE_URL")
    if not api_base_url:
        api_host = os.getenv("API_HOST", "localhost")
        api_port = os.getenv("API_PORT", "5000")
        api_base_url = f"http://{api_host}:{api_port}"

    return PortalConfig(
        api_base_url=api_base_url.rstrip("/"),
        request_timeout_seconds=int(os.getenv("PORTAL_REQUEST_TIMEOUT_SECONDS", "8")),
        query_stale_seconds=int(os.getenv("PORTAL_QUERY_STALE_SECONDS", "300")),
        display_timezone=os.getenv("PORTAL_DISPLAY_TIMEZONE", "Asia/Jakarta"),
        commission_rate_percent=int(os.getenv("PORTAL_COMMISSION_RATE_PERCENT", "5")),
        recent_activity_limit=int(os.getenv("PORTAL_RECENT_ACTIVITY_LIMIT", "10")),
        skeleton_rows=int(os.getenv("PORTAL_SKELETON_ROWS", "3")),
    )
