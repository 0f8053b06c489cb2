"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class BrowserSettings:
    """Options handed to the session factory when a run opens its browser."""

    name: str = "chromium"
    base_url: str | None = None


@dataclass(frozen=True)
class ExecutionSettings:
    """Host loop settings for one suite run."""

    parallelism: int = 4
    idle_timeout_seconds: int = 600
    screenshot_dir: Path = Path("screenshots")


@dataclass(frozen=True)
class ResultsSettings:
    """Where run results are written."""

    output_dir: Path | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    browser: BrowserSettings = field(default_factory=BrowserSettings)
    execution: ExecutionSettings = field(default_factory=ExecutionSettings)
    results: ResultsSettings = field(default_factory=ResultsSettings)
