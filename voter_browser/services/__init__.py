from .export_service import EXPORT_COLUMNS, Report, ReportService, export_filename, voters_to_csv

__all__ = ["EXPORT_COLUMNS", "Report", "ReportService", "export_filename", "voters_to_csv"]
