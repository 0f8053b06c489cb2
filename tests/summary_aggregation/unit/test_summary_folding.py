"""Summary folding and report text tests."""

from __future__ import annotations

from browser_suite_runner.step_results import Expectation, StepResult
from browser_suite_runner.summary_aggregation import (
    Summary,
    build_final_report,
    fold_step_result,
    format_seconds,
    timing_footer,
)


def test_passing_expectation_appends_check_line() -> None:
    summary = Summary()

    fold_step_result(StepResult("Title is 'Home'", Expectation.passing()), summary)

    assert summary.output == "✅  Title is 'Home'\n"
    assert (summary.passed, summary.failed) == (1, 0)


def test_failing_expectation_appends_given_and_indented_message() -> None:
    summary = Summary()
    expectation = Expectation.failing("'a'\n╷\n│ Expect.text\n╵\n'b'", given="Given the element h1")

    fold_step_result(StepResult("Text of h1 is 'b'", expectation), summary)

    assert summary.output == (
        "❌  Text of h1 is 'b'\n"
        "Given the element h1\n"
        "    'a'\n"
        "    ╷\n"
        "    │ Expect.text\n"
        "    ╵\n"
        "    'b'\n\n"
    )
    assert (summary.passed, summary.failed) == (0, 1)


def test_failing_expectation_without_given_skips_given_line() -> None:
    summary = Summary()

    fold_step_result(StepResult("Click #go", Expectation.failing("TimeoutError")), summary)

    assert summary.output == "❌  Click #go\n    TimeoutError\n\n"


def test_screenshot_only_result_records_path_without_counts() -> None:
    summary = Summary()

    fold_step_result(StepResult("Capture screenshot cart", screenshot="shots/cart.png"), summary)

    assert summary.output == ""
    assert summary.screenshots == ["shots/cart.png"]
    assert (summary.passed, summary.failed) == (0, 0)


def test_result_with_expectation_and_screenshot_records_both() -> None:
    summary = Summary()

    fold_step_result(StepResult("Shot", Expectation.passing(), "a.png"), summary)

    assert summary.passed == 1
    assert summary.screenshots == ["a.png"]


def test_timing_footer_uses_two_decimals() -> None:
    assert format_seconds(1.254) == "1.25"
    assert timing_footer(elapsed=2.5, waited=0.125) == "Took 2.50s. Waited 0.12s for dispatch"


def test_final_report_for_passing_suite() -> None:
    summary = Summary(output="ignored", passed=4)

    build_final_report(summary, started_at=10.0, finished_at=13.5)

    assert summary.output == "\n\nOK. 4 assertions passed. Took 3.50s in total."
    assert summary.exit_code == 0


def test_final_report_for_failing_suite() -> None:
    summary = Summary(passed=2, failed=1)

    build_final_report(summary, started_at=0.0, finished_at=1.0)

    assert summary.output == (
        "\n\nFailed: 1 assertions failed, 2 assertions passed. Took 1.00s in total."
    )
    assert summary.exit_code == 1


def test_result_without_expectation_or_screenshot_leaves_summary_untouched() -> None:
    summary = Summary()

    fold_step_result(StepResult("Accept cookies"), summary)

    assert summary.output == ""
    assert (summary.passed, summary.failed) == (0, 0)
    assert summary.screenshots == []


def test_failing_expectation_with_empty_message_adds_no_blank_indented_line() -> None:
    summary = Summary()

    fold_step_result(StepResult("Click #go", Expectation.failing("")), summary)

    assert summary.output == "❌  Click #go\n\n"
    assert summary.failed == 1
