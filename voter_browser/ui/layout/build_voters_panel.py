from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dash_table, html

from voter_browser.ui.helpers import TABLE_FONT, voter_card

TABLE_COLUMNS = ("voter_id", "name", "age", "gender", "parent_name", "municipality", "ward", "booth")


def voter_data_table(table_id: str, columns, page_size: int, **kwargs) -> dash_table.DataTable:
    return dash_table.DataTable(
        id=table_id,
        columns=[{"name": c.replace("_", " ").title(), "id": c} for c in columns],
        data=[],
        page_size=page_size,
        style_table={"overflowX": "auto"},
        style_as_list_view=True,
        style_cell={
            "fontFamily": TABLE_FONT,
            "fontSize": "12px",
            "padding": "6px 8px",
            "textAlign": "left",
        },
        style_header={"fontWeight": "600", "backgroundColor": "#f3f4f6"},
        **kwargs,
    )


def build_voters_panel(page_size: int) -> dbc.Card:
    table = voter_data_table(
        "voter-table",
        TABLE_COLUMNS,
        page_size,
        page_current=0,
        page_action="custom",
        sort_action="custom",
        sort_mode="single",
        sort_by=[{"column_id": "name", "direction": "asc"}],
    )

    return dbc.Card(
        [
            dbc.CardHeader(html.Div(id="voter-count", className="fw-semibold")),
            dbc.CardBody(
                dbc.Row(
                    [
                        dbc.Col(table, lg=8),
                        dbc.Col(html.Div(voter_card(None), id="voter-detail"), lg=4),
                    ],
                    className="g-3",
                )
            ),
        ],
        className="vb-maincard mt-3",
    )
