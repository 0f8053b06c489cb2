"""Summary aggregation exports."""

from .summary_folding import (
    FAIL_MARK,
    PASS_MARK,
    build_final_report,
    fold_expectation,
    fold_step_result,
    format_seconds,
    timing_footer,
)
from .summary_models import Summary

__all__ = [
    "Summary",
    "PASS_MARK",
    "FAIL_MARK",
    "fold_step_result",
    "fold_expectation",
    "format_seconds",
    "timing_footer",
    "build_final_report",
]
