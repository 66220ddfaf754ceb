# This file defines the generic list view shared by all fetch-filter-render pages.
# It exists so a page is declared as an entity plus filter settings plus a row template instead of bespoke code.
# The view model step is pure pandas and independent of Streamlit, which keeps it unit-testable.
# Rendering lives in components/record_list.py and takes a DataView as its only page-specific input.

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pandas as pd

from src.portal.list_filters import (
    ALL_CATEGORIES,
    filter_category,
    filter_status,
    owned_by,
    search_records,
)

RowRenderer = Callable[[dict[str, Any]], None]


@dataclass(frozen=True)
class DataView:
    key: str
    title: str
    subtitle: str = ""
    search_fields: tuple[str, ...] = ()
    search_placeholder: str = "Cari..."
    category_field: str | None = None
    categories: tuple[str, ...] = ()
    status: str | None = None
    owner_field: str | None = None
    empty_title: str = "Tidak ada data"
    empty_message: str = ""

    @property
    def searchable(self) -> bool:
        return bool(self.search_fields)

    def apply(
        self,
        frame: pd.DataFrame,
        *,
        query: str = "",
        category: str | None = None,
        owner_id: str | None = None,
    ) -> pd.DataFrame:
        view = frame
        if self.owner_field:
            view = owned_by(view, self.owner_field, owner_id)
        view = filter_status(view, self.status)
        view = search_records(view, query, self.search_fields)
        if self.category_field:
            view = filter_category(view, category, field=self.category_field, all_label=ALL_CATEGORIES)
        return view
