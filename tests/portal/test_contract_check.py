# This test file verifies the portal API contract check against a stub client.
# It exists so missing fields and unreachable endpoints are both reported as failures.

from __future__ import annotations

from typing import Any

from src.portal.api_client import ApiUnavailableError
from src.portal.contract_check import build_report, missing_fields, run_contract_check


class _ContractClient:
    def get_members(self) -> list[dict[str, Any]]:
        return [
            {
                "id": "m-1",
                "name": "Ani",
                "email": "ani@example.com",
                "balance": 0,
                "isLocked": False,
                "withdrawalLocked": False,
                "status": "active",
                "creditScore": 100,
                "createdAt": "2026-10-01T00:00:00Z",
            }
        ]

    def get_deposits(self) -> list[dict[str, Any]]:
        return [{"id": "d-1", "memberId": "m-1", "status": "pending", "createdAt": "2026-10-01T00:00:00Z"}]

    def get_withdrawals(self) -> list[dict[str, Any]]:
        raise ApiUnavailableError("api down")

    def get_products(self, *, active_only: bool = True) -> list[dict[str, Any]]:
        return []

    def get_activities(self) -> list[dict[str, Any]]:
        return []

    def get_notifications(self) -> list[dict[str, Any]]:
        return []

    def get_users(self) -> list[dict[str, Any]]:
        return []

    def get_system_banks(self, *, active_only: bool = True) -> list[dict[str, Any]]:
        return []


def test_missing_fields_ignores_optional_relations() -> None:
    rows = [{"id": "n-1", "memberId": "m-1", "title": "Hi", "message": "x", "type": "info", "isRead": False}]

    assert missing_fields("notifications", rows) == ["created_at"]


def test_run_contract_check_reports_each_endpoint() -> None:
    reports = {report.path: report for report in run_contract_check(_ContractClient())}

    assert reports["/api/members"].ok
    assert reports["/api/deposits"].missing_fields == ["amount"]
    assert reports["/api/withdrawals"].error == "api down"
    assert reports["/api/products"].ok
    assert len(reports) == 8


def test_build_report_renders_table_rows() -> None:
    reports = run_contract_check(_ContractClient())

    report = build_report(reports, base_url="http://localhost:5000", generated_at="2026-10-19T00:00:00Z")

    assert "| `/api/members` | 1 | ok |" in report
    assert "| `/api/deposits` | 1 | missing: amount |" in report
    assert "error: api down" in report
