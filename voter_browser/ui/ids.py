from __future__ import annotations

__all__ = ["IDs", "OVERVIEW_GRAPHS"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"
        DATASET_VERSION = "dataset-version"
        MAP_DRILL = "map-drill"

    class Control:
        # Filters (sidebar)
        SEARCH_INPUT = "search-input"
        GENDER_SELECT = "gender-select"
        MUNICIPALITY_SELECT = "municipality-select"
        WARD_SELECT = "ward-select"
        BOOTH_SELECT = "booth-select"
        AGE_RANGE = "age-range-slider"
        RESET_BTN = "reset-filters-btn"
        ACTIVE_FILTERS = "active-filters-text"

        # Navbar
        DATASET_STATUS = "navbar-dataset-status"

        # Overview
        KPI_ROW = "kpi-row"

        # Analytics
        VIEW_SELECT = "view-select"
        MAIN_GRAPH = "main-graph"

        # Voters table
        VOTER_TABLE = "voter-table"
        VOTER_COUNT = "voter-count"
        VOTER_DETAIL = "voter-detail"

        # Constituency map
        MAP_TITLE = "map-title"
        MAP_BACK_BTN = "map-back-btn"
        MAP_GRAPH = "map-graph"
        MAP_VOTERS = "map-voters"
        MAP_VOTER_TABLE = "map-voter-table"
        MAP_VOTER_DETAIL = "map-voter-detail"

        # Reports
        REPORT_TYPE_SELECT = "report-type-select"
        REPORT_TITLE = "report-title"
        REPORT_FILTERS = "report-filters"
        REPORT_SUMMARY = "report-summary"
        REPORT_TABLE = "report-table"
        REPORT_EXPORT_BTN = "report-export-btn"
        REPORT_DOWNLOAD = "report-download"

        # Upload
        CSV_UPLOAD = "csv-upload"
        UPLOAD_STATUS = "upload-status"
        SAMPLE_RELOAD_BTN = "sample-reload-btn"


# Overview tab: (graph id, view id)
OVERVIEW_GRAPHS = (
    ("overview-gender-graph", "gender_distribution"),
    ("overview-age-graph", "age_distribution"),
    ("overview-municipality-graph", "municipality_voters"),
    ("overview-ward-graph", "ward_gender_trend"),
)
