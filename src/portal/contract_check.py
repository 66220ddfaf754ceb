# This file checks that the read endpoints used by the portal still return the fields pages rely on.
# It exists so renamed or dropped API fields are caught before pages silently show "-" everywhere.
# Each endpoint is fetched once; records are compared against the entity column set in camelCase.

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Final

from src.portal.api_client import ApiRejectedError, ApiUnavailableError, PortalApiClient
from src.portal.data_access import ENTITY_COLUMNS, to_snake_case

# Relation and audit fields that the API legitimately omits when unset.
OPTIONAL_FIELDS: Final[set[str]] = {
    "lock_reason",
    "withdrawal_lock_reason",
    "assigned_agent_id",
    "bank_name",
    "bank_account_number",
    "bank_account_name",
    "rejection_reason",
    "proof_url",
    "processed_by",
    "processed_at",
    "image_url",
    "member_id",
    "user_id",
    "user_role",
    "user_name",
    "parent_id",
    "invitation_code",
    "phone",
}


@dataclass
class EndpointReport:
    path: str
    entity: str
    record_count: int = 0
    missing_fields: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and not self.missing_fields


def endpoint_checks(client: PortalApiClient) -> list[tuple[str, str, Callable[[], list[dict[str, Any]]]]]:
    return [
        ("/api/members", "members", client.get_members),
        ("/api/deposits", "deposits", client.get_deposits),
        ("/api/withdrawals", "withdrawals", client.get_withdrawals),
        ("/api/products", "products", lambda: client.get_products(active_only=False)),
        ("/api/activities", "activities", client.get_activities),
        ("/api/notifications", "notifications", client.get_notifications),
        ("/api/users", "users", client.get_users),
        ("/api/system-banks", "system_banks", lambda: client.get_system_banks(active_only=False)),
    ]


def missing_fields(entity: str, rows: list[dict[str, Any]]) -> list[str]:
    """Required snake_case columns absent from at least one record."""

    required = [column for column in ENTITY_COLUMNS[entity] if column not in OPTIONAL_FIELDS]
    missing: set[str] = set()
    for row in rows:
        present = {to_snake_case(key) for key in row}
        missing.update(column for column in required if column not in present)
    return sorted(missing)


def run_contract_check(client: PortalApiClient) -> list[EndpointReport]:
    reports: list[EndpointReport] = []
    for path, entity, fetch in endpoint_checks(client):
        report = EndpointReport(path=path, entity=entity)
        try:
            rows = fetch()
        except (ApiUnavailableError, ApiRejectedError) as exc:
            report.error = str(exc)
        else:
            report.record_count = len(rows)
            report.missing_fields = missing_fields(entity, rows)
        reports.append(report)
    return reports


def build_report(reports: list[EndpointReport], *, base_url: str, generated_at: str) -> str:
    lines = [
        "# Portal API Contract Check",
        "",
        f"- Base URL: `{base_url}`",
        f"- Generated at: `{generated_at}`",
        "",
        "| Endpoint | Records | Result |",
        "| --- | ---: | --- |",
    ]
    for report in reports:
        if report.error:
            result = f"error: {report.error}"
        elif report.missing_fields:
            result = "missing: " + ", ".join(report.missing_fields)
        else:
            result = "ok"
        lines.append(f"| `{report.path}` | {report.record_count} | {result} |")
    return "\n".join(lines) + "\n"
