"""Step library for building suites.

Action steps (`navigate`, `click`, `fill`) report a passing expectation when
the browser call returns. Assertion steps raise `ExpectationFailure` on a
mismatch. `screenshot` produces a screenshot-only outcome. Any other exception
raised by the browser session is reported by the session adapter as a failing
step; it never aborts the run.
"""

from __future__ import annotations

from collections.abc import Callable

from browser_suite_runner.suite_definition.run_tree import Step

from .step_outcomes import Expectation, ExpectationFailure, StepContext, StepOutcome

StepAction = Callable[[StepContext], StepOutcome]


def step(description: str, action: StepAction) -> Step:
    """Build a custom step from a description and an action."""
    return Step(description=description, action=action)


def navigate(url: str) -> Step:
    def action(context: StepContext) -> StepOutcome:
        context.session.navigate(context.resolve_url(url))
        return StepOutcome(expectation=Expectation.passing())

    return step(f"Navigate to {url}", action)


def click(selector: str) -> Step:
    def action(context: StepContext) -> StepOutcome:
        context.session.click(selector)
        return StepOutcome(expectation=Expectation.passing())

    return step(f"Click {selector}", action)


def fill(selector: str, text: str) -> Step:
    def action(context: StepContext) -> StepOutcome:
        context.session.fill(selector, text)
        return StepOutcome(expectation=Expectation.passing())

    return step(f"Enter {text!r} into {selector}", action)


def expect_title(expected: str) -> Step:
    def action(context: StepContext) -> StepOutcome:
        actual = context.session.title()
        if actual != expected:
            raise ExpectationFailure("Expect.title", expected, actual)
        return StepOutcome(expectation=Expectation.passing())

    return step(f"Title is {expected!r}", action)


def expect_text(selector: str, expected: str) -> Step:
    def action(context: StepContext) -> StepOutcome:
        actual = context.session.text_of(selector).strip()
        if actual != expected:
            raise ExpectationFailure(
                "Expect.text",
                expected,
                actual,
                given=f"Given the element {selector}",
            )
        return StepOutcome(expectation=Expectation.passing())

    return step(f"Text of {selector} is {expected!r}", action)


def expect_url(fragment: str) -> Step:
    def action(context: StepContext) -> StepOutcome:
        actual = context.session.current_url()
        if fragment not in actual:
            raise ExpectationFailure("Expect.urlContains", fragment, actual)
        return StepOutcome(expectation=Expectation.passing())

    return step(f"URL contains {fragment!r}", action)


def screenshot(name: str) -> Step:
    def action(context: StepContext) -> StepOutcome:
        path = context.screenshot_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        return StepOutcome(screenshot=context.session.screenshot(path))

    return step(f"Capture screenshot {name}", action)
