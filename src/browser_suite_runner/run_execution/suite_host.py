"""Host loop realizing orchestrator effects.

Session commands run on a thread pool; their results, together with clock
readings, are funnelled through one queue back into `process_event`, which
is only ever called from the thread running `SuiteHost.run`.
"""

from __future__ import annotations

import logging
import queue
import time
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import UTC, datetime
from functools import partial

from browser_suite_runner.session_adapters.adapter_contracts import TaskFailure
from browser_suite_runner.status_tracking.run_status import RunStatus, StatusSnapshot
from browser_suite_runner.suite_definition.dispatch_keys import DispatchKey
from browser_suite_runner.suite_definition.run_tree import RunNode
from browser_suite_runner.summary_aggregation.summary_models import Summary

from .orchestrator import begin, process_event
from .run_contracts import (
    BroadcastStatus,
    Effect,
    Event,
    LogRun,
    PerformTask,
    PersistScreenshots,
    ReportSuite,
    StampTime,
    SuiteFlags,
    SuiteOptions,
)

LOGGER = logging.getLogger(__name__)


class SuiteExecutionError(Exception):
    """Raised when the host loop cannot drive the suite to completion."""


class SuiteListener:
    """Receives host-side notifications; every hook is optional."""

    def on_status(self, snapshot: StatusSnapshot) -> None:
        pass

    def on_screenshots(self, key: DispatchKey, paths: Sequence[str]) -> None:
        pass

    def on_run_logged(self, key: DispatchKey, summary: Summary) -> None:
        pass


@dataclass(frozen=True)
class RunRecord:
    """Final view of one dispatched run."""

    key: DispatchKey
    status: RunStatus
    summary: Summary
    screenshots: tuple[str, ...]


@dataclass(frozen=True)
class SuiteReport:
    """Everything the host observed once the suite finished."""

    summary: Summary
    runs: tuple[RunRecord, ...]
    started_at: datetime

    @property
    def exit_code(self) -> int:
        return self.summary.exit_code


@dataclass
class _RunCollector:
    """Mutable record of side effects seen by the host."""

    snapshot: StatusSnapshot = ()
    screenshots: dict[DispatchKey, tuple[str, ...]] = field(default_factory=dict)
    logged: dict[DispatchKey, Summary] = field(default_factory=dict)

    def build_runs(self) -> tuple[RunRecord, ...]:
        return tuple(
            RunRecord(
                key=key,
                status=status,
                summary=self.logged.get(key, Summary()),
                screenshots=self.screenshots.get(key, ()),
            )
            for key, status in self.snapshot
        )


class SuiteHost:
    """Drives one suite from `begin` to the terminal report."""

    def __init__(
        self,
        *,
        max_workers: int = 4,
        idle_timeout_seconds: float = 600.0,
        clock: Callable[[], float] = time.time,
        listener: SuiteListener | None = None,
    ) -> None:
        self._max_workers = max(1, max_workers)
        self._idle_timeout_seconds = idle_timeout_seconds
        self._clock = clock
        self._listener = listener or SuiteListener()

    def run(self, options: SuiteOptions, run_tree: RunNode, flags: SuiteFlags) -> SuiteReport:
        """Run the suite and return its report.

        Raises:
          SuiteExecutionError: If no event arrives within the idle timeout.
        """
        started_at = datetime.now(UTC)
        events: queue.Queue[Event] = queue.Queue()
        collector = _RunCollector()
        executor = ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="browser-session"
        )
        completed = False
        try:
            state, effects = begin(options, run_tree, flags)
            final = self._realize(effects, executor, events, collector)
            while final is None:
                try:
                    event = events.get(timeout=self._idle_timeout_seconds)
                except queue.Empty as exc:
                    active = ", ".join(str(key) for key in sorted(state.adapters)) or "none"
                    raise SuiteExecutionError(
                        f"No run reported progress for {self._idle_timeout_seconds:g} seconds "
                        f"(active runs: {active})."
                    ) from exc
                state, effects = process_event(event, state)
                final = self._realize(effects, executor, events, collector)
            completed = True
        finally:
            executor.shutdown(wait=completed, cancel_futures=not completed)

        return SuiteReport(summary=final, runs=collector.build_runs(), started_at=started_at)

    def _realize(
        self,
        effects: Sequence[Effect],
        executor: ThreadPoolExecutor,
        events: queue.Queue[Event],
        collector: _RunCollector,
    ) -> Summary | None:
        final: Summary | None = None
        for effect in effects:
            if isinstance(effect, PerformTask):
                future = executor.submit(effect.task)
                future.add_done_callback(partial(_enqueue_result, effect.tag, events))
            elif isinstance(effect, StampTime):
                events.put(effect.tag(self._clock()))
            elif isinstance(effect, BroadcastStatus):
                collector.snapshot = effect.snapshot
                self._listener.on_status(effect.snapshot)
            elif isinstance(effect, PersistScreenshots):
                collector.screenshots[effect.key] = effect.paths
                self._listener.on_screenshots(effect.key, effect.paths)
            elif isinstance(effect, LogRun):
                collector.logged[effect.key] = effect.summary
                self._listener.on_run_logged(effect.key, effect.summary)
            elif isinstance(effect, ReportSuite):
                LOGGER.info(
                    "Suite finished: %d passed, %d failed",
                    effect.summary.passed,
                    effect.summary.failed,
                )
                final = effect.summary
            else:
                raise TypeError(f"Unsupported effect: {effect!r}")
        return final


def _enqueue_result(
    tag: Callable[[object], Event], events: queue.Queue[Event], future: Future
) -> None:
    if future.cancelled():
        return
    try:
        result = future.result()
    except Exception as exc:  # pylint: disable=broad-exception-caught
        LOGGER.warning("Session task failed: %s", exc, exc_info=exc)
        result = TaskFailure(error=exc)
    events.put(tag(result))
