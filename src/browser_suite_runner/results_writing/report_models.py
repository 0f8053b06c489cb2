"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class RunResultStatus(str, Enum):
    """Rendered status in the Runs sheet."""

    PASSED = "PASSED"
    FAILED = "FAILED"
    INCOMPLETE = "INCOMPLETE"


@dataclass(frozen=True)
class SuiteMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    suite_path: Path
    name_filter: str | None
    browser_name: str
