# This file collects the formatting helpers shared by every portal page.
# It exists so currency, dates, and ratings render identically on every screen.
# All helpers are pure functions with the Indonesian display conventions fixed in one place.
# Missing values degrade to short literal fallbacks that Streamlit can display directly.

from __future__ import annotations

import math
from typing import Any, Final
from zoneinfo import ZoneInfo

import pandas as pd

DEFAULT_TIMEZONE: Final[str] = "Asia/Jakarta"

MONTHS_SHORT: Final[tuple[str, ...]] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "Mei",
    "Jun",
    "Jul",
    "Agu",
    "Sep",
    "Okt",
    "Nov",
    "Des",
)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def format_number(value: float | int | None) -> str:
    """Group thousands with dots, as the id-ID locale does."""

    if _is_missing(value):
        return "0"
    return f"{int(round(float(value))):,}".replace(",", ".")


def format_currency(value: float | int | None) -> str:
    if _is_missing(value):
        return "-"
    amount = int(round(float(value)))
    sign = "-" if amount < 0 else ""
    return f"{sign}Rp{format_number(abs(amount))}"


def format_date(
    value: Any,
    *,
    with_year: bool = True,
    timezone: str = DEFAULT_TIMEZONE,
) -> str:
    if _is_missing(value):
        return "-"
    timestamp = pd.to_datetime(value, utc=True, errors="coerce")
    if _is_missing(timestamp):
        return "-"
    local = timestamp.tz_convert(ZoneInfo(timezone))
    day = f"{local.day:02d} {MONTHS_SHORT[local.month - 1]}"
    if with_year:
        day = f"{day} {local.year}"
    return f"{day}, {local.hour:02d}.{local.minute:02d}"


def format_rating(value: float | int | None) -> str:
    # Ratings are stored in tenths, 45 means 4.5 stars.
    if _is_missing(value):
        return "0.0"
    return f"{float(value) / 10:.1f}"


def format_count(value: int | float | None) -> str:
    if _is_missing(value):
        return "0"
    return format_number(value)


def format_percent(value: float | int | None) -> str:
    if _is_missing(value) or (isinstance(value, float) and math.isinf(value)):
        return "-"
    return f"{float(value):g}%"


def initial_of(name: Any, *, fallback: str = "?") -> str:
    if _is_missing(name) or not str(name).strip():
        return fallback
    return str(name).strip()[0].upper()


def short_id(record_id: Any) -> str:
    if _is_missing(record_id):
        return "-"
    return str(record_id)[:8].upper()


def display_text(value: Any, *, fallback: str = "-") -> str:
    if _is_missing(value) or not str(value).strip():
        return fallback
    return str(value)


def display_name(record: dict[str, Any] | None, *, fallback: str = "Unknown") -> str:
    if not record:
        return fallback
    return display_text(record.get("name"), fallback=fallback)
