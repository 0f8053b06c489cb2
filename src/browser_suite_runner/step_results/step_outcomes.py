"""Step result entities."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urljoin

if TYPE_CHECKING:
    from browser_suite_runner.session_adapters.browser_session import BrowserSession

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class Expectation:
    """Pass/fail outcome of one step, with failure diagnostics."""

    passed: bool
    message: str = ""
    given: str = ""

    @staticmethod
    def passing() -> Expectation:
        return Expectation(passed=True)

    @staticmethod
    def failing(message: str, given: str = "") -> Expectation:
        return Expectation(passed=False, message=message, given=given)


@dataclass(frozen=True)
class StepOutcome:
    """What a step action produced: an expectation, a screenshot path, or both."""

    expectation: Expectation | None = None
    screenshot: str | None = None


@dataclass(frozen=True)
class StepResult:
    """Completed step reported by a session adapter."""

    description: str
    expectation: Expectation | None = None
    screenshot: str | None = None


class ExpectationFailure(Exception):
    """Raised by assertion steps when the observed page state differs."""

    def __init__(self, check: str, expected: object, actual: object, given: str = "") -> None:
        super().__init__(f"{check}: expected {expected!r}, got {actual!r}")
        self.check = check
        self.expected = expected
        self.actual = actual
        self.given = given


@dataclass(frozen=True)
class StepContext:
    """Everything a step action may touch while it runs."""

    session: BrowserSession
    screenshot_dir: Path
    session_label: str
    step_index: int
    base_url: str | None = None

    def screenshot_path(self, name: str) -> Path:
        safe_name = _UNSAFE_FILENAME_CHARS.sub("_", name).strip("_") or "screenshot"
        return self.screenshot_dir / f"{self.session_label}-{self.step_index:03d}-{safe_name}.png"

    def resolve_url(self, url: str) -> str:
        if self.base_url:
            return urljoin(self.base_url, url)
        return url
