"""Folding of step results into summaries, and report text."""

from __future__ import annotations

from browser_suite_runner.step_results.step_outcomes import Expectation, StepResult

from .summary_models import Summary

PASS_MARK = "✅  "
FAIL_MARK = "❌  "
_MESSAGE_INDENT = "    "


def fold_step_result(result: StepResult, summary: Summary) -> None:
    """Record one completed step in a per-run summary.

    Results without an expectation only contribute their screenshot;
    results with neither are ignored.
    """
    if result.expectation is not None:
        fold_expectation(result.description, result.expectation, summary)
    if result.screenshot is not None:
        summary.screenshots.append(result.screenshot)


def fold_expectation(description: str, expectation: Expectation, summary: Summary) -> None:
    if expectation.passed:
        summary.output += f"{PASS_MARK}{description}\n"
        summary.passed += 1
        return

    block = f"{FAIL_MARK}{description}\n"
    if expectation.given:
        block += f"{expectation.given}\n"
    if expectation.message:
        block += _indent(expectation.message) + "\n"
    block += "\n"
    summary.output += block
    summary.failed += 1


def format_seconds(seconds: float) -> str:
    return f"{seconds:.2f}"


def timing_footer(elapsed: float, waited: float) -> str:
    return f"Took {format_seconds(elapsed)}s. Waited {format_seconds(waited)}s for dispatch"


def build_final_report(summary: Summary, started_at: float, finished_at: float) -> None:
    """Write the suite status line and epilog into the suite summary's output."""
    if summary.failed > 0:
        status_line = f"Failed: {summary.failed} assertions failed, "
    else:
        status_line = "OK. "
    elapsed = format_seconds(finished_at - started_at)
    epilog = f"{summary.passed} assertions passed. Took {elapsed}s in total."
    summary.output = "\n\n" + status_line + epilog


def _indent(message: str) -> str:
    return "\n".join(f"{_MESSAGE_INDENT}{line}" for line in message.split("\n"))
