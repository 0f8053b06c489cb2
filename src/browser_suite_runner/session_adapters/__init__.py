"""Session adapter exports."""

from .adapter_contracts import (
    AdapterCommand,
    Finalized,
    NoSignal,
    Progress,
    ProgressSignal,
    SessionAdapter,
    Spawned,
    TaskFailure,
)
from .browser_session import BrowserSession, SessionFactory
from .step_session_adapter import (
    SessionClosed,
    SessionOpened,
    SessionOpenFailed,
    SessionPhase,
    StepExecuted,
    StepSessionAdapter,
    StepSessionState,
)

__all__ = [
    "AdapterCommand",
    "ProgressSignal",
    "Spawned",
    "Progress",
    "Finalized",
    "NoSignal",
    "TaskFailure",
    "SessionAdapter",
    "BrowserSession",
    "SessionFactory",
    "StepSessionAdapter",
    "StepSessionState",
    "SessionPhase",
    "SessionOpened",
    "SessionOpenFailed",
    "StepExecuted",
    "SessionClosed",
]
