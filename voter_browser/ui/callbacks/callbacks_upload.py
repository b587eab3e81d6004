from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State

from voter_browser.core.exceptions import NoValidRecordsError, ParseError
from voter_browser.ui.helpers import decode_upload
from voter_browser.ui.ids import IDs

if TYPE_CHECKING:
    from voter_browser.ui.context import AppContext

logger = logging.getLogger(__name__)


def register_upload_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    store = ctx.store
    config = ctx.global_config

    @app.callback(
        Output(IDs.Control.UPLOAD_STATUS, "children"),
        Output(IDs.Store.DATASET_VERSION, "data"),
        Input(IDs.Control.CSV_UPLOAD, "contents"),
        Input(IDs.Control.SAMPLE_RELOAD_BTN, "n_clicks"),
        State(IDs.Control.CSV_UPLOAD, "filename"),
        prevent_initial_call=True,
    )
    def replace_dataset(contents, _sample_clicks, filename):
        trigger = dash.ctx.triggered_id

        if trigger == IDs.Control.SAMPLE_RELOAD_BTN:
            count = store.load_sample(config.sample_size, seed=config.sample_seed)
            return (
                dbc.Alert(f"Loaded {count:,} sample voters.", color="info", dismissable=True),
                store.version,
            )

        if not contents:
            raise dash.exceptions.PreventUpdate

        try:
            text = decode_upload(contents, config.max_upload_bytes)
            count = store.import_from_text(text, delimiter=config.csv_delimiter)
        except NoValidRecordsError as exc:
            return dbc.Alert(str(exc), color="danger", dismissable=True), dash.no_update
        except ParseError as exc:
            logger.warning("Upload rejected", extra={"upload_filename": filename, "reason": str(exc)})
            return dbc.Alert(f"Could not read {filename or 'file'}: {exc}", color="danger", dismissable=True), dash.no_update

        return (
            dbc.Alert(
                f"Successfully loaded {count:,} voters from {filename or 'CSV'}.",
                color="success",
                dismissable=True,
            ),
            store.version,
        )
