"""Step results and step library exports."""

from .failure_rendering import render_failure, render_transport_error
from .step_library import (
    click,
    expect_text,
    expect_title,
    expect_url,
    fill,
    navigate,
    screenshot,
    step,
)
from .step_outcomes import (
    Expectation,
    ExpectationFailure,
    StepContext,
    StepOutcome,
    StepResult,
)

__all__ = [
    "Expectation",
    "ExpectationFailure",
    "StepContext",
    "StepOutcome",
    "StepResult",
    "render_failure",
    "render_transport_error",
    "step",
    "navigate",
    "click",
    "fill",
    "expect_title",
    "expect_text",
    "expect_url",
    "screenshot",
]
