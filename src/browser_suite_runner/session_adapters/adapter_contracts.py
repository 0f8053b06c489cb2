"""Session adapter contract consumed by the orchestrator."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias

from browser_suite_runner.step_results.step_outcomes import StepResult
from browser_suite_runner.suite_definition.run_tree import Step

AdapterCommand: TypeAlias = Callable[[], object]
"""Blocking unit of work the host runs off-loop; its return value is fed back as a payload."""


@dataclass(frozen=True)
class Spawned:
    """The browser session became usable."""


@dataclass(frozen=True)
class Progress:
    """One step completed."""

    remaining: int
    step_result: StepResult
    next_step: str


@dataclass(frozen=True)
class Finalized:
    """No more steps; the run is over."""


@dataclass(frozen=True)
class NoSignal:
    """Transport bookkeeping with no effect on progress."""


ProgressSignal: TypeAlias = "Spawned | Progress | Finalized | NoSignal"


@dataclass(frozen=True)
class TaskFailure:
    """Payload the host feeds back when an adapter command raised."""

    error: BaseException


class SessionAdapter(Protocol):
    """Per-run state machine wrapping one browser session."""

    def init(self, steps: Sequence[Step]) -> tuple[Any, AdapterCommand | None]: ...

    def update(
        self, payload: object, state: Any
    ) -> tuple[Any, AdapterCommand | None, ProgressSignal]: ...
