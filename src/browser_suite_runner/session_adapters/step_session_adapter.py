"""Session adapter executing step-library steps against one browser session."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum
from functools import partial
from pathlib import Path

from browser_suite_runner.configuration.runtime_settings import BrowserSettings
from browser_suite_runner.step_results.failure_rendering import (
    render_failure,
    render_transport_error,
)
from browser_suite_runner.step_results.step_outcomes import (
    Expectation,
    ExpectationFailure,
    StepContext,
    StepOutcome,
    StepResult,
)
from browser_suite_runner.suite_definition.run_tree import Step

from .adapter_contracts import (
    AdapterCommand,
    Finalized,
    NoSignal,
    Progress,
    ProgressSignal,
    Spawned,
    TaskFailure,
)
from .browser_session import BrowserSession, SessionFactory

LOGGER = logging.getLogger(__name__)

OPEN_SESSION_DESCRIPTION = "Open browser session"
DONE_DESCRIPTION = "Done"


class SessionPhase(str, Enum):
    """Lifecycle phase of one adapted browser session."""

    OPENING = "opening"
    RUNNING = "running"
    CLOSING = "closing"
    CLOSED = "closed"


@dataclass(frozen=True)
class StepSessionState:
    """Adapter state for one run; `position` is the index of the next step."""

    label: str
    steps: tuple[Step, ...]
    phase: SessionPhase
    position: int = 0
    session: BrowserSession | None = None


@dataclass(frozen=True)
class SessionOpened:
    session: BrowserSession


@dataclass(frozen=True)
class SessionOpenFailed:
    error: BaseException


@dataclass(frozen=True)
class StepExecuted:
    result: StepResult


@dataclass(frozen=True)
class SessionClosed:
    pass


class StepSessionAdapter:
    """Opens a session, runs each step in order, then closes the session.

    Every failure, whether an assertion mismatch or a transport error, is
    reported as a failing step result and execution moves on to the next step.
    """

    def __init__(
        self,
        session_factory: SessionFactory,
        browser_settings: BrowserSettings,
        screenshot_dir: Path,
    ) -> None:
        self._session_factory = session_factory
        self._browser_settings = browser_settings
        self._screenshot_dir = screenshot_dir
        self._labels = itertools.count(1)

    def init(self, steps: Sequence[Step]) -> tuple[StepSessionState, AdapterCommand]:
        state = StepSessionState(
            label=f"session-{next(self._labels):03d}",
            steps=tuple(steps),
            phase=SessionPhase.OPENING,
        )
        return state, self._open_session

    def update(
        self, payload: object, state: StepSessionState
    ) -> tuple[StepSessionState, AdapterCommand | None, ProgressSignal]:
        if isinstance(payload, TaskFailure):
            payload = _payload_for_task_failure(payload.error, state)

        if isinstance(payload, SessionOpened) and state.phase is SessionPhase.OPENING:
            opened = replace(state, phase=SessionPhase.RUNNING, session=payload.session)
            advanced, command = self._advance(opened)
            return advanced, command, Spawned()
        if isinstance(payload, SessionOpenFailed) and state.phase is SessionPhase.OPENING:
            return self._on_open_failed(payload.error, state)
        if isinstance(payload, StepExecuted) and state.phase is SessionPhase.RUNNING:
            return self._on_step_executed(payload.result, state)
        if isinstance(payload, SessionClosed) and state.phase is SessionPhase.CLOSING:
            return replace(state, phase=SessionPhase.CLOSED, session=None), None, Finalized()
        return state, None, NoSignal()

    def _on_step_executed(
        self, result: StepResult, state: StepSessionState
    ) -> tuple[StepSessionState, AdapterCommand, ProgressSignal]:
        moved = replace(state, position=state.position + 1)
        remaining = len(moved.steps) - moved.position
        next_step = moved.steps[moved.position].description if remaining else DONE_DESCRIPTION
        advanced, command = self._advance(moved)
        return advanced, command, Progress(remaining=remaining, step_result=result, next_step=next_step)

    def _on_open_failed(
        self, error: BaseException, state: StepSessionState
    ) -> tuple[StepSessionState, AdapterCommand, ProgressSignal]:
        LOGGER.warning("Could not open browser session %s: %s", state.label, error)
        result = StepResult(
            description=OPEN_SESSION_DESCRIPTION,
            expectation=render_transport_error(error),
        )
        closing = replace(state, phase=SessionPhase.CLOSING, position=len(state.steps))
        return (
            closing,
            partial(self._close_session, None),
            Progress(remaining=0, step_result=result, next_step=DONE_DESCRIPTION),
        )

    def _advance(self, state: StepSessionState) -> tuple[StepSessionState, AdapterCommand]:
        if state.position < len(state.steps):
            return state, partial(
                self._execute_step,
                state.session,
                state.steps[state.position],
                state.label,
                state.position,
            )
        return replace(state, phase=SessionPhase.CLOSING), partial(
            self._close_session, state.session
        )

    def _open_session(self) -> SessionOpened | SessionOpenFailed:
        try:
            session = self._session_factory(self._browser_settings)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return SessionOpenFailed(error=exc)
        return SessionOpened(session=session)

    def _execute_step(
        self, session: BrowserSession, step: Step, label: str, index: int
    ) -> StepExecuted:
        context = StepContext(
            session=session,
            screenshot_dir=self._screenshot_dir,
            session_label=label,
            step_index=index,
            base_url=self._browser_settings.base_url,
        )
        try:
            outcome = step.action(context)
        except ExpectationFailure as exc:
            return StepExecuted(
                StepResult(description=step.description, expectation=render_failure(exc))
            )
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return StepExecuted(
                StepResult(description=step.description, expectation=render_transport_error(exc))
            )
        if not isinstance(outcome, StepOutcome):
            outcome = StepOutcome(expectation=Expectation.passing())
        return StepExecuted(
            StepResult(
                description=step.description,
                expectation=outcome.expectation,
                screenshot=outcome.screenshot,
            )
        )

    @staticmethod
    def _close_session(session: BrowserSession | None) -> SessionClosed:
        if session is not None:
            try:
                session.close()
            except Exception:  # pylint: disable=broad-exception-caught
                LOGGER.warning("Failed to close browser session", exc_info=True)
        return SessionClosed()


def _payload_for_task_failure(error: BaseException, state: StepSessionState) -> object:
    if state.phase is SessionPhase.OPENING:
        return SessionOpenFailed(error=error)
    if state.phase is SessionPhase.RUNNING:
        step = state.steps[state.position]
        return StepExecuted(
            StepResult(description=step.description, expectation=render_transport_error(error))
        )
    if state.phase is SessionPhase.CLOSING:
        LOGGER.warning("Closing browser session %s failed: %s", state.label, error)
        return SessionClosed()
    return None
