"""Run tree flattening service."""

from __future__ import annotations

from dataclasses import dataclass

from .run_tree import Leaf, RunNode, Step

GROUP_SEPARATOR = " / "


@dataclass(frozen=True)
class FlatRun:
    """Run with its group-qualified display name."""

    qualified_name: str
    steps: tuple[Step, ...]


def flatten(tree: RunNode) -> tuple[FlatRun, ...]:
    """Flatten a run tree into leaves in declaration order, depth-first.

    Every group name is prefixed onto its descendants' names with
    `GROUP_SEPARATOR`. Uses an explicit stack, so nesting depth is bounded
    only by memory.
    """
    flat_runs: list[FlatRun] = []
    stack: list[tuple[RunNode, str]] = [(tree, "")]
    while stack:
        node, prefix = stack.pop()
        if isinstance(node, Leaf):
            flat_runs.append(FlatRun(qualified_name=prefix + node.name, steps=node.steps))
            continue
        child_prefix = f"{prefix}{node.name}{GROUP_SEPARATOR}"
        # Reversed so the first declared child is popped first.
        for child in reversed(node.children):
            stack.append((child, child_prefix))
    return tuple(flat_runs)
