"""Suite orchestration: dispatch, event routing, status and summary rollup.

All state changes happen in `process_event`, one event at a time. Nothing
here blocks or reads the clock: work that takes time is returned as effects
for the host to realize, and their results come back as events.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from functools import partial
from typing import Any

from browser_suite_runner.session_adapters.adapter_contracts import (
    AdapterCommand,
    Finalized,
    NoSignal,
    Progress,
    ProgressSignal,
    Spawned,
)
from browser_suite_runner.status_tracking.run_status import StatusTable
from browser_suite_runner.suite_definition.dispatch_keys import DispatchKey, select_runs
from browser_suite_runner.suite_definition.run_tree import RunNode
from browser_suite_runner.summary_aggregation.summary_folding import (
    build_final_report,
    fold_step_result,
    timing_footer,
)
from browser_suite_runner.summary_aggregation.summary_models import Summary

from .run_contracts import (
    AdapterEvent,
    Begin,
    BroadcastStatus,
    Effect,
    Event,
    LogRun,
    PerformTask,
    PersistScreenshots,
    ReportSuite,
    StampTime,
    StartedRun,
    StartRun,
    StopRun,
    SuiteFlags,
    SuiteOptions,
)

LOGGER = logging.getLogger(__name__)


@dataclass
class OrchestratorState:  # pylint: disable=too-many-instance-attributes
    """Everything the orchestrator owns for one suite run."""

    options: SuiteOptions
    run_tree: RunNode
    statuses: StatusTable = field(default_factory=StatusTable)
    summaries: dict[DispatchKey, Summary] = field(default_factory=dict)
    adapters: dict[DispatchKey, Any] = field(default_factory=dict)
    init_times: dict[DispatchKey, float] = field(default_factory=dict)
    start_times: dict[DispatchKey, float] = field(default_factory=dict)
    stopping: set[DispatchKey] = field(default_factory=set)
    summary: Summary = field(default_factory=Summary)
    dispatched: bool = False
    finished: bool = False


def begin(
    options: SuiteOptions, run_tree: RunNode, flags: SuiteFlags
) -> tuple[OrchestratorState, list[Effect]]:
    """Create the orchestrator state and dispatch the suite."""
    state = OrchestratorState(options=options, run_tree=run_tree)
    return process_event(Begin(name_filter=flags.name_filter), state)


def process_event(event: Event, state: OrchestratorState) -> tuple[OrchestratorState, list[Effect]]:
    """Apply one event to `state` and return it with the effects to realize."""
    if state.finished:
        LOGGER.debug("Ignoring %s after the suite finished", type(event).__name__)
        return state, []
    if isinstance(event, Begin):
        if state.dispatched:
            LOGGER.debug("Ignoring repeated Begin")
            return state, []
        return dispatch(event.name_filter, state)
    if isinstance(event, StartRun):
        return state, _on_start_run(event, state)
    if isinstance(event, StartedRun):
        return state, _on_started_run(event, state)
    if isinstance(event, AdapterEvent):
        return state, _on_adapter_event(event, state)
    if isinstance(event, StopRun):
        return state, _on_stop_run(event, state)
    raise TypeError(f"Unsupported event: {event!r}")


def dispatch(
    name_filter: str | None, state: OrchestratorState
) -> tuple[OrchestratorState, list[Effect]]:
    """Create one adapter, summary and status per selected run and schedule their start."""
    state.dispatched = True
    selected = select_runs(state.run_tree, name_filter)
    if not selected:
        LOGGER.info("No runs match filter %r", name_filter)
        build_final_report(state.summary, 0.0, 0.0)
        state.finished = True
        return state, [ReportSuite(summary=state.summary)]

    effects: list[Effect] = []
    for key, run in selected:
        adapter_state, command = state.options.adapter.init(run.steps)
        state.adapters[key] = adapter_state
        state.summaries[key] = Summary()
        state.statuses.register(key, len(run.steps))
        effects.append(StampTime(tag=partial(StartRun, key, command)))
    effects.append(BroadcastStatus(snapshot=state.statuses.snapshot()))
    return state, effects


def _on_start_run(event: StartRun, state: OrchestratorState) -> list[Effect]:
    if event.key not in state.adapters:
        LOGGER.debug("Ignoring start of inactive run %s", event.key)
        return []
    state.init_times[event.key] = event.timestamp
    if event.command is None:
        return []
    return [_perform(event.key, event.command)]


def _on_started_run(event: StartedRun, state: OrchestratorState) -> list[Effect]:
    if event.key not in state.adapters:
        LOGGER.debug("Ignoring session start of inactive run %s", event.key)
        return []
    state.start_times[event.key] = event.timestamp
    return []


def _on_adapter_event(event: AdapterEvent, state: OrchestratorState) -> list[Effect]:
    key = event.key
    if key not in state.adapters:
        LOGGER.debug("Ignoring adapter event for inactive run %s", key)
        return []

    adapter_state, command, signal = state.options.adapter.update(
        event.payload, state.adapters[key]
    )
    state.adapters[key] = adapter_state
    effects: list[Effect] = []
    if command is not None:
        effects.append(_perform(key, command))
    effects.extend(_on_signal(key, signal, state))
    return effects


def _on_signal(key: DispatchKey, signal: ProgressSignal, state: OrchestratorState) -> list[Effect]:
    if isinstance(signal, Spawned):
        return [StampTime(tag=partial(StartedRun, key))]
    if isinstance(signal, Progress):
        run_summary = state.summaries[key]
        fold_step_result(signal.step_result, run_summary)
        state.statuses.apply_progress(
            key,
            remaining=signal.remaining,
            next_step=signal.next_step,
            failed=run_summary.failed > 0,
        )
        return [BroadcastStatus(snapshot=state.statuses.snapshot())]
    if isinstance(signal, Finalized):
        return _finalize(key, state)
    if isinstance(signal, NoSignal):
        return []
    raise TypeError(f"Unsupported progress signal: {signal!r}")


def _finalize(key: DispatchKey, state: OrchestratorState) -> list[Effect]:
    del state.adapters[key]
    run_summary = state.summaries.pop(key, None) or Summary()
    state.summary.passed += run_summary.passed
    state.summary.failed += run_summary.failed
    state.stopping.add(key)
    return [
        StampTime(tag=partial(StopRun, key, run_summary)),
        PersistScreenshots(key=key, paths=tuple(run_summary.screenshots)),
    ]


def _on_stop_run(event: StopRun, state: OrchestratorState) -> list[Effect]:
    key = event.key
    state.stopping.discard(key)
    stopped_at = event.timestamp
    started_at = state.start_times.get(key, stopped_at)
    initiated_at = state.init_times.get(key, stopped_at)
    footer = timing_footer(elapsed=stopped_at - started_at, waited=started_at - initiated_at)
    logged = replace(
        event.summary,
        output=event.summary.output + footer,
        screenshots=list(event.summary.screenshots),
    )
    effects: list[Effect] = [LogRun(key=key, summary=logged)]

    # Runs finalized back-to-back each await their own StopRun; report after the last.
    if state.adapters or state.stopping:
        return effects
    suite_started_at = min(state.start_times.values(), default=stopped_at)
    build_final_report(state.summary, suite_started_at, stopped_at)
    state.finished = True
    effects.append(ReportSuite(summary=state.summary))
    return effects


def _perform(key: DispatchKey, command: AdapterCommand) -> PerformTask:
    return PerformTask(task=command, tag=partial(AdapterEvent, key))
