# This file checks the portal's read endpoints against the fields the pages render.
# It exists so API field renames are detected before a portal release.
# The script writes a human-readable markdown report and exits non-zero on any failure.
# ruff: noqa: E402

from __future__ import annotations

import sys
from datetime import UTC, datetime
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.common.logging import configure_logging
from src.portal.api_client import PortalApiClient
from src.portal.contract_check import build_report, run_contract_check
from src.portal.portal_config import load_portal_config

REPORT_PATH = Path("reports/portal/api_contract_report.md")


def main() -> int:
    configure_logging()
    config = load_portal_config()
    client = PortalApiClient(
        base_url=config.api_base_url,
        timeout_seconds=config.request_timeout_seconds,
    )

    reports = run_contract_check(client)
    REPORT_PATH.parent.mkdir(parents=True, exist_ok=True)
    REPORT_PATH.write_text(
        build_report(
            reports,
            base_url=config.api_base_url,
            generated_at=datetime.now(tz=UTC).isoformat(),
        ),
        encoding="utf-8",
    )

    failures = [report for report in reports if not report.ok]
    if failures:
        print("Portal API contract check failed:")
        for report in failures:
            detail = report.error or ", ".join(report.missing_fields)
            print(f"- {report.path}: {detail}")
        return 1

    print(f"Portal API contract check passed. Report: {REPORT_PATH}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
