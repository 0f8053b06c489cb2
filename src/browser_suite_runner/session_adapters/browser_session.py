"""Browser automation transport contract."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from browser_suite_runner.configuration.runtime_settings import BrowserSettings


class BrowserSession(Protocol):
    """One open browser session driven by the step library.

    Implementations raise on transport errors; the session adapter turns
    those into failing step results.
    """

    def navigate(self, url: str) -> None: ...

    def click(self, selector: str) -> None: ...

    def fill(self, selector: str, text: str) -> None: ...

    def title(self) -> str: ...

    def current_url(self) -> str: ...

    def text_of(self, selector: str) -> str: ...

    def screenshot(self, path: Path) -> str: ...

    def close(self) -> None: ...


SessionFactory = Callable[[BrowserSettings], BrowserSession]
