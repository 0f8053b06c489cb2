"""Summary aggregation entities."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Summary:
    """Pass/fail accumulator for one run or for the whole suite.

    A per-run summary collects report lines and screenshots as step results
    arrive. The suite summary only collects counts; its `output` is written
    once, with the final report.
    """

    output: str = ""
    passed: int = 0
    failed: int = 0
    screenshots: list[str] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed > 0 else 0
