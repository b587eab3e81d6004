from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from voter_browser.core.aggregates import SORTABLE_COLUMNS
from voter_browser.ui.helpers import selected_voter_id, voter_card
from voter_browser.ui.ids import IDs
from voter_browser.ui.layout.build_voters_panel import TABLE_COLUMNS

if TYPE_CHECKING:
    from voter_browser.ui.context import AppContext

logger = logging.getLogger(__name__)


def _table_sort_key(sort_by: list[dict] | None) -> tuple[str, bool]:
    if sort_by:
        column = sort_by[0].get("column_id")
        if column in SORTABLE_COLUMNS:
            return column, sort_by[0].get("direction") == "desc"
    return "name", False


def register_voter_table_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    engine = ctx.engine
    page_size = ctx.global_config.page_size

    # ---------------------------------------------------------
    # Jump back to the first page whenever the filters change
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.VOTER_TABLE, "page_current"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def reset_page(_fs_data: dict[str, Any] | None):
        return 0

    # ---------------------------------------------------------
    # Filtered, sorted, paged voter rows
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.VOTER_TABLE, "data"),
        Output(IDs.Control.VOTER_TABLE, "page_count"),
        Output(IDs.Control.VOTER_COUNT, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.VOTER_TABLE, "page_current"),
        Input(IDs.Control.VOTER_TABLE, "sort_by"),
    )
    def update_voter_table(_fs_data, page_current, sort_by):
        key, descending = _table_sort_key(sort_by)
        ordered = engine.sorted_subset(key, descending)

        n = len(ordered)
        page_count = max(1, -(-n // page_size))
        rows = engine.page(ordered, page_current or 0, page_size)

        total = len(engine.store)
        count_text = f"Showing {n:,} of {total:,} voters"
        records = [dict(r, id=r["voter_id"]) for r in rows[list(TABLE_COLUMNS)].to_dict("records")]
        return records, page_count, count_text

    # ---------------------------------------------------------
    # Profile card for the clicked row
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.VOTER_DETAIL, "children"),
        Input(IDs.Control.VOTER_TABLE, "active_cell"),
        Input(IDs.Control.VOTER_TABLE, "data"),
    )
    def show_voter_detail(active_cell, rows):
        voter_id = selected_voter_id(active_cell, rows)
        return voter_card(engine.voter(voter_id) if voter_id else None)
