"""Run execution domain exports."""

from .orchestrator import OrchestratorState, begin, dispatch, process_event
from .run_contracts import (
    AdapterEvent,
    Begin,
    BroadcastStatus,
    LogRun,
    PerformTask,
    PersistScreenshots,
    ReportSuite,
    RunOutcome,
    RunRequest,
    StampTime,
    StartedRun,
    StartRun,
    StopRun,
    SuiteFlags,
    SuiteOptions,
)
from .suite_host import RunRecord, SuiteExecutionError, SuiteHost, SuiteListener, SuiteReport
from .suite_run_use_case import RunExecutionError, execute_suite_run

__all__ = [
    "OrchestratorState",
    "begin",
    "dispatch",
    "process_event",
    "SuiteOptions",
    "SuiteFlags",
    "Begin",
    "StartRun",
    "StartedRun",
    "StopRun",
    "AdapterEvent",
    "PerformTask",
    "StampTime",
    "BroadcastStatus",
    "PersistScreenshots",
    "LogRun",
    "ReportSuite",
    "SuiteHost",
    "SuiteListener",
    "SuiteReport",
    "RunRecord",
    "SuiteExecutionError",
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_suite_run",
]
