"""Live per-run progress tracking."""

from __future__ import annotations

from dataclasses import dataclass, replace

from browser_suite_runner.suite_definition.dispatch_keys import DispatchKey

WAITING_FOR_START = "Waiting for start"


@dataclass
class RunStatus:
    """Progress of one dispatched run."""

    failed: bool
    total: int
    remaining: int
    next_step: str


StatusSnapshot = tuple[tuple[DispatchKey, RunStatus], ...]


class StatusTable:
    """Mapping from dispatch key to live run progress.

    Entries are created at dispatch and kept after a run finalizes so the
    last broadcast still lists every run. The `failed` flag only ever goes
    from False to True.
    """

    def __init__(self) -> None:
        self._statuses: dict[DispatchKey, RunStatus] = {}

    def register(self, key: DispatchKey, step_count: int) -> None:
        self._statuses[key] = RunStatus(
            failed=False,
            total=step_count,
            remaining=step_count,
            next_step=WAITING_FOR_START,
        )

    def apply_progress(
        self, key: DispatchKey, *, remaining: int, next_step: str, failed: bool
    ) -> None:
        status = self._statuses.get(key)
        if status is None:
            return
        status.remaining = remaining
        status.failed = status.failed or failed
        status.next_step = next_step

    def get(self, key: DispatchKey) -> RunStatus | None:
        return self._statuses.get(key)

    def snapshot(self) -> StatusSnapshot:
        """Return a detached copy of every entry, ordered by dispatch key."""
        return tuple((key, replace(self._statuses[key])) for key in sorted(self._statuses))

    def __contains__(self, key: object) -> bool:
        return key in self._statuses

    def __len__(self) -> int:
        return len(self._statuses)
