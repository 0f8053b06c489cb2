"""Suite run use-case service."""

from __future__ import annotations

import time
from collections.abc import Callable
from pathlib import Path

from browser_suite_runner.configuration import (
    Configuration,
    ConfigurationError,
    load_configuration,
)
from browser_suite_runner.results_writing import (
    ResultsWritingError,
    SuiteMetadata,
    resolve_workbook_path,
    write_results_workbook,
)
from browser_suite_runner.session_adapters.browser_session import SessionFactory
from browser_suite_runner.session_adapters.step_session_adapter import StepSessionAdapter
from browser_suite_runner.suite_definition.suite_loader import (
    LoadedSuite,
    SuiteLoadError,
    load_suite,
)

from .run_contracts import RunOutcome, RunRequest, SuiteFlags, SuiteOptions
from .suite_host import SuiteExecutionError, SuiteHost, SuiteListener, SuiteReport


class RunExecutionError(Exception):
    """Raised when a suite run cannot be completed."""


def execute_suite_run(
    request: RunRequest,
    *,
    listener: SuiteListener | None = None,
    session_factory: SessionFactory | None = None,
    clock: Callable[[], float] = time.time,
) -> RunOutcome:
    """Execute one suite run and return its outcome.

    `session_factory` replaces the suite file's `open_session` when given.
    """
    configuration, suite = _load_run_inputs(request)
    adapter = StepSessionAdapter(
        session_factory=session_factory or suite.session_factory,
        browser_settings=configuration.browser,
        screenshot_dir=configuration.execution.screenshot_dir,
    )
    host = SuiteHost(
        max_workers=configuration.execution.parallelism,
        idle_timeout_seconds=configuration.execution.idle_timeout_seconds,
        clock=clock,
        listener=listener,
    )
    try:
        report = host.run(
            SuiteOptions(adapter=adapter, browser=configuration.browser),
            suite.tree,
            SuiteFlags(name_filter=request.name_filter),
        )
    except SuiteExecutionError as exc:
        raise RunExecutionError(str(exc)) from exc

    workbook_path = _write_workbook(request, configuration, suite, report)
    return RunOutcome(
        exit_code=report.exit_code,
        passed=report.summary.passed,
        failed=report.summary.failed,
        report_text=report.summary.output,
        workbook_path=workbook_path,
    )


def _load_run_inputs(request: RunRequest) -> tuple[Configuration, LoadedSuite]:
    try:
        configuration = load_configuration(request.config_path)
        suite = load_suite(request.suite_path)
    except (ConfigurationError, SuiteLoadError) as exc:
        raise RunExecutionError(str(exc)) from exc
    return configuration, suite


def _write_workbook(
    request: RunRequest,
    configuration: Configuration,
    suite: LoadedSuite,
    report: SuiteReport,
) -> Path | None:
    output_dir = request.output_dir or configuration.results.output_dir
    if output_dir is None:
        return None
    metadata = SuiteMetadata(
        run_start=report.started_at,
        suite_path=suite.path,
        name_filter=request.name_filter,
        browser_name=configuration.browser.name,
    )
    try:
        return write_results_workbook(
            resolve_workbook_path(suite.path, output_dir), report, metadata
        )
    except ResultsWritingError as exc:
        raise RunExecutionError(str(exc)) from exc
