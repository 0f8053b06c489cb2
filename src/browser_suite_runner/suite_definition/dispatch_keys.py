"""Dispatch key assignment for flattened runs."""

from __future__ import annotations

from dataclasses import dataclass

from .flattening import FlatRun, flatten
from .run_tree import RunNode


@dataclass(frozen=True, order=True)
class DispatchKey:
    """Unique identifier of one dispatched run: filtered position plus display name."""

    index: int
    name: str

    def __str__(self) -> str:
        return f"{self.index} - {self.name}"


def select_runs(
    tree: RunNode, name_filter: str | None = None
) -> tuple[tuple[DispatchKey, FlatRun], ...]:
    """Flatten `tree`, keep runs whose name contains `name_filter`, and key them.

    Matching is plain case-sensitive substring containment. Indices count
    positions in the filtered sequence, so keys stay unique even when two
    runs share a display name.
    """
    flat_runs = flatten(tree)
    if name_filter is not None:
        flat_runs = tuple(run for run in flat_runs if name_filter in run.qualified_name)
    return tuple(
        (DispatchKey(index=index, name=run.qualified_name), run)
        for index, run in enumerate(flat_runs)
    )
