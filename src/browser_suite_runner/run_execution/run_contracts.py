"""Run execution entities: options, events, effects, and use-case contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

from browser_suite_runner.configuration.runtime_settings import BrowserSettings
from browser_suite_runner.session_adapters.adapter_contracts import AdapterCommand, SessionAdapter
from browser_suite_runner.status_tracking.run_status import StatusSnapshot
from browser_suite_runner.suite_definition.dispatch_keys import DispatchKey
from browser_suite_runner.summary_aggregation.summary_models import Summary


@dataclass(frozen=True)
class SuiteOptions:
    """Immutable collaborators and settings for one suite run."""

    adapter: SessionAdapter
    browser: BrowserSettings = field(default_factory=BrowserSettings)


@dataclass(frozen=True)
class SuiteFlags:
    """Launch flags; `name_filter` keeps runs whose qualified name contains it."""

    name_filter: str | None = None


# Events fed into process_event.


@dataclass(frozen=True)
class Begin:
    name_filter: str | None = None


@dataclass(frozen=True)
class StartRun:
    """A run was handed off for session creation at `timestamp`."""

    key: DispatchKey
    command: AdapterCommand | None
    timestamp: float


@dataclass(frozen=True)
class StartedRun:
    """A run's session became usable at `timestamp`."""

    key: DispatchKey
    timestamp: float


@dataclass(frozen=True)
class StopRun:
    """A finalized run, with its summary, stopped at `timestamp`."""

    key: DispatchKey
    summary: Summary
    timestamp: float


@dataclass(frozen=True)
class AdapterEvent:
    """Result of an adapter command, routed to the adapter owning `key`."""

    key: DispatchKey
    payload: object


Event: TypeAlias = "Begin | StartRun | StartedRun | StopRun | AdapterEvent"


# Effects realized by the host.


@dataclass(frozen=True)
class PerformTask:
    """Run `task` off the event loop and feed `tag(result)` back as an event."""

    task: Callable[[], object]
    tag: Callable[[object], Event]


@dataclass(frozen=True)
class StampTime:
    """Read the host clock and feed `tag(now)` back as an event."""

    tag: Callable[[float], Event]


@dataclass(frozen=True)
class BroadcastStatus:
    """Full replacement snapshot of the status table."""

    snapshot: StatusSnapshot


@dataclass(frozen=True)
class PersistScreenshots:
    key: DispatchKey
    paths: tuple[str, ...]


@dataclass(frozen=True)
class LogRun:
    """Per-run report text, timing footer included."""

    key: DispatchKey
    summary: Summary


@dataclass(frozen=True)
class ReportSuite:
    """Terminal report; the host exits with `summary.exit_code` after receiving it."""

    summary: Summary


Effect: TypeAlias = (
    "PerformTask | StampTime | BroadcastStatus | PersistScreenshots | LogRun | ReportSuite"
)


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one suite run."""

    suite_path: str
    config_path: str | None = None
    name_filter: str | None = None
    output_dir: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed suite run."""

    exit_code: int
    passed: int
    failed: int
    report_text: str
    workbook_path: Path | None
