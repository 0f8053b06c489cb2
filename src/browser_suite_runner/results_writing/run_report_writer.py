"""Results workbook writer service."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from openpyxl import Workbook
from openpyxl.styles import Alignment
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .report_models import RunResultStatus, SuiteMetadata

if TYPE_CHECKING:
    from browser_suite_runner.run_execution.suite_host import RunRecord, SuiteReport

RUNS_SHEET_NAME = "Runs"
SCREENSHOTS_SHEET_NAME = "Screenshots"
RUN_INFO_SHEET_NAME = "RunInfo"

RUN_COLUMNS: tuple[str, ...] = ("Key", "Run", "Status", "Steps", "Passed", "Failed", "Output")
SCREENSHOT_COLUMNS: tuple[str, ...] = ("Key", "Path")


class ResultsWritingError(Exception):
    """Raised when the results workbook cannot be written."""


def resolve_workbook_path(suite_path: Path | str, output_dir: Path | str) -> Path:
    """Return a timestamped workbook path for `suite_path` inside `output_dir`."""
    timestamp = datetime.now(UTC).strftime("%Y%m%d-%H%M%S")
    return Path(output_dir) / f"{Path(suite_path).stem}-results-{timestamp}.xlsx"


def write_results_workbook(
    output_path: Path | str,
    report: SuiteReport,
    metadata: SuiteMetadata,
) -> Path:
    """Write Runs, Screenshots and RunInfo sheets for a finished suite."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise ResultsWritingError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = RUNS_SHEET_NAME

    _write_run_rows(sheet, report.runs)
    _write_screenshot_sheet(workbook, report.runs)
    _write_run_info_sheet(workbook, report, metadata)

    output = Path(output_path)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(output)
    except OSError as exc:
        raise ResultsWritingError(f"Failed to write results workbook {output}: {exc}") from exc
    return output.resolve()


def resolve_run_status(record: RunRecord) -> RunResultStatus:
    if record.status.failed or record.summary.failed > 0:
        return RunResultStatus.FAILED
    if record.status.remaining > 0:
        return RunResultStatus.INCOMPLETE
    return RunResultStatus.PASSED


def _write_run_rows(sheet: Worksheet, runs: Sequence[RunRecord]) -> None:
    _write_header(sheet, RUN_COLUMNS)
    for row, record in enumerate(runs, start=2):
        values = (
            str(record.key),
            record.key.name,
            resolve_run_status(record).value,
            record.status.total,
            record.summary.passed,
            record.summary.failed,
            record.summary.output,
        )
        for column, value in enumerate(values, start=1):
            sheet.cell(row=row, column=column, value=value)
        sheet.cell(row=row, column=len(RUN_COLUMNS)).alignment = Alignment(
            wrap_text=True, vertical="top"
        )
    sheet.column_dimensions[get_column_letter(len(RUN_COLUMNS))].width = 80


def _write_screenshot_sheet(workbook: Workbook, runs: Sequence[RunRecord]) -> None:
    sheet = workbook.create_sheet(SCREENSHOTS_SHEET_NAME)
    _write_header(sheet, SCREENSHOT_COLUMNS)
    row = 2
    for record in runs:
        for path in record.screenshots:
            sheet.cell(row=row, column=1, value=str(record.key))
            sheet.cell(row=row, column=2, value=path)
            row += 1


def _write_run_info_sheet(workbook: Workbook, report: SuiteReport, metadata: SuiteMetadata) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = (
        ("run_start", metadata.run_start.isoformat()),
        ("suite_path", str(metadata.suite_path)),
        ("filter", metadata.name_filter or ""),
        ("browser", metadata.browser_name),
        ("runs", len(report.runs)),
        ("passed", report.summary.passed),
        ("failed", report.summary.failed),
        ("result", report.summary.output.strip()),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)


def _write_header(sheet: Worksheet, columns: Sequence[str]) -> None:
    for column_index, name in enumerate(columns, start=1):
        sheet.cell(row=1, column=column_index, value=name)
        sheet.cell(row=1, column=column_index).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )
