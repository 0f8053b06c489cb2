"""Results writing domain exports."""

from .report_models import RunResultStatus, SuiteMetadata
from .run_report_writer import (
    RUN_INFO_SHEET_NAME,
    RUNS_SHEET_NAME,
    SCREENSHOTS_SHEET_NAME,
    ResultsWritingError,
    resolve_run_status,
    resolve_workbook_path,
    write_results_workbook,
)

__all__ = [
    "RunResultStatus",
    "SuiteMetadata",
    "RUNS_SHEET_NAME",
    "SCREENSHOTS_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "ResultsWritingError",
    "resolve_run_status",
    "resolve_workbook_path",
    "write_results_workbook",
]
