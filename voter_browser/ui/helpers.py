from __future__ import annotations

import base64
import binascii
from typing import List, Optional

import dash_bootstrap_components as dbc
import pandas as pd
from dash import dash_table, html

from voter_browser.core.aggregates import KpiSummary
from voter_browser.core.engine import VoterEngine
from voter_browser.core.exceptions import ParseError
from voter_browser.core.voter import CANONICAL_GENDERS, Voter

TABLE_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def options(values: List[str]) -> List[dict]:
    return [{"label": v, "value": v} for v in values]


def gender_options() -> List[dict]:
    return options(list(CANONICAL_GENDERS))


def filter_dropdown_options(engine: VoterEngine):
    return (
        options(engine.available_municipalities()),
        options(engine.available_wards()),
        options(engine.available_booths()),
    )


SOURCE_LABELS = {
    "empty": "no data loaded",
    "sample": "sample data",
    "csv": "uploaded CSV",
    "records": "loaded records",
}


def dataset_status_text(engine: VoterEngine) -> str:
    source = SOURCE_LABELS.get(engine.store.source, engine.store.source)
    return f"{len(engine.store):,} voters · {source}"


def active_filters_text(engine: VoterEngine) -> str:
    labels = engine.criteria.active_filter_labels()
    return " · ".join(labels) if labels else "No filters applied"


def kpi_cards(kpis: KpiSummary) -> dbc.Row:
    cards = [
        ("Total Voters", f"{kpis.total:,}", f"of {kpis.dataset_total:,} total"),
        ("Male / Female", f"{kpis.male} / {kpis.female}", f"{kpis.female_pct:.1f}% female"),
        ("Municipalities", str(kpis.municipalities), f"{kpis.wards} total wards"),
        ("Average Age", str(kpis.average_age), "years old"),
    ]
    return dbc.Row(
        [
            dbc.Col(
                dbc.Card(
                    dbc.CardBody(
                        [
                            html.Div(label, className="text-muted small"),
                            html.H3(value, className="mb-0"),
                            html.Div(subtext, className="text-muted small"),
                        ]
                    ),
                    className="vb-kpi-card",
                ),
                md=3,
            )
            for label, value, subtext in cards
        ],
        className="g-3",
    )


def _format_cell(value):
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return "N/A"
    if isinstance(value, float):
        return f"{value:.2f}" if not value.is_integer() else f"{value:.1f}"
    return value


def frame_table(df: pd.DataFrame, table_id: Optional[str] = None, page_size: int = 20) -> dash_table.DataTable:
    """
    Build a styled Dash DataTable for a report or preview frame.
    """
    records = [{k: _format_cell(v) for k, v in row.items()} for row in df.to_dict("records")]
    kwargs = {"id": table_id} if table_id else {}

    return dash_table.DataTable(
        data=records,
        columns=[{"name": c.replace("_", " ").title(), "id": c} for c in df.columns],
        style_table={"overflowX": "auto"},
        style_as_list_view=True,
        style_cell={
            "fontFamily": TABLE_FONT,
            "fontSize": "12px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
        },
        style_header={
            "fontFamily": TABLE_FONT,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={"borderBottom": "1px solid #e5e7eb"},
        page_size=page_size,
        **kwargs,
    )


def selected_voter_id(active_cell: Optional[dict], rows: Optional[List[dict]]) -> Optional[str]:
    """
    voter_id of the row holding a DataTable's active cell, if any. Rows carry
    their voter_id as the DataTable row id, which survives native paging.
    """
    if not active_cell:
        return None
    if active_cell.get("row_id"):
        return str(active_cell["row_id"])
    if not rows:
        return None
    row = active_cell.get("row")
    if row is None or not 0 <= row < len(rows):
        return None
    return rows[row].get("voter_id") or None


def voter_card(voter: Optional[Voter]) -> dbc.Card:
    """
    Profile card for one voter: photo, id badge, then age/gender, parent,
    spouse and the municipality/ward/booth they vote in.
    """
    if voter is None:
        return dbc.Card(
            dbc.CardBody(html.Div("Select a voter to see their profile.", className="text-muted small")),
            className="vb-voter-card",
        )

    fields = [
        ("Age / Gender", f"{voter.age} / {voter.gender}"),
        ("Parent", voter.parent_name or "N/A"),
        ("Spouse", voter.spouse or "N/A"),
        ("Municipality", voter.municipality),
        ("Ward", voter.ward),
        ("Booth", voter.booth),
    ]
    header = [
        html.Img(src=voter.picture, alt=f"Photo of {voter.name}", className="vb-voter-photo")
        if voter.picture
        else None,
        html.H5(voter.name, className="mt-2 mb-1"),
        dbc.Badge(voter.voter_id, color="light", text_color="dark", className="border"),
    ]
    return dbc.Card(
        dbc.CardBody(
            [
                html.Div([h for h in header if h is not None], className="text-center"),
                html.Hr(),
                dbc.Row(
                    [
                        dbc.Col(
                            [html.Div(label, className="text-muted small"), html.Div(value, className="fw-semibold")],
                            width=6,
                            className="mb-2",
                        )
                        for label, value in fields
                    ]
                ),
            ]
        ),
        className="vb-voter-card",
    )


def decode_upload(contents: str, max_bytes: int) -> str:
    """
    Decode a dcc.Upload data URL into text.

    Raises:
        ParseError: if the payload is not base64, too large, or not UTF-8 text
    """
    try:
        _header, payload = contents.split(",", 1)
        raw = base64.b64decode(payload, validate=True)
    except (ValueError, binascii.Error):
        raise ParseError("Upload could not be decoded.")

    if len(raw) > max_bytes:
        raise ParseError(f"File is larger than {max_bytes:,} bytes.")

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise ParseError("File is not UTF-8 text.")
