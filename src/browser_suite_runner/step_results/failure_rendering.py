"""Rendering of step failures into report text."""

from __future__ import annotations

from .step_outcomes import Expectation, ExpectationFailure


def render_failure(failure: ExpectationFailure) -> Expectation:
    """Render an assertion failure as a failing expectation with message and given."""
    message = "\n".join(
        (
            repr(failure.actual),
            "╷",
            f"│ {failure.check}",
            "╵",
            repr(failure.expected),
        )
    )
    return Expectation.failing(message=message, given=failure.given)


def render_transport_error(error: BaseException) -> Expectation:
    """Render a browser transport error as a failing expectation."""
    detail = str(error).strip()
    message = f"{type(error).__name__}: {detail}" if detail else type(error).__name__
    return Expectation.failing(message=message)
