"""Status tracking exports."""

from .run_status import WAITING_FOR_START, RunStatus, StatusSnapshot, StatusTable

__all__ = ["RunStatus", "StatusSnapshot", "StatusTable", "WAITING_FOR_START"]
