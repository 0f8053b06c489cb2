"""Run tree entities describing a suite before execution."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Step:
    """One browser interaction plus the outcome it checks.

    `action` is called by the session adapter with a step context and returns
    a step outcome; the run tree never calls it itself.
    """

    description: str
    action: Callable[..., object]


@dataclass(frozen=True)
class Leaf:
    """Named list of steps executed against one browser session."""

    name: str
    steps: tuple[Step, ...]


@dataclass(frozen=True)
class Group:
    """Named grouping of runs; qualifies descendant names when flattened."""

    name: str
    children: tuple[RunNode, ...]


RunNode: TypeAlias = "Leaf | Group"


def describe(name: str, steps: Iterable[Step]) -> Leaf:
    """Build a run executing `steps` in one browser session."""
    return Leaf(name=name, steps=tuple(steps))


def group(name: str, runs: Iterable[RunNode]) -> Group:
    """Build a named group of runs."""
    return Group(name=name, children=tuple(runs))
