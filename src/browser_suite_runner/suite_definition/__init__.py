"""Suite definition domain exports."""

from .dispatch_keys import DispatchKey, select_runs
from .flattening import GROUP_SEPARATOR, FlatRun, flatten
from .run_tree import Group, Leaf, RunNode, Step, describe, group
from .suite_loader import LoadedSuite, SuiteLoadError, load_suite

__all__ = [
    "Step",
    "Leaf",
    "Group",
    "RunNode",
    "describe",
    "group",
    "FlatRun",
    "GROUP_SEPARATOR",
    "flatten",
    "DispatchKey",
    "select_runs",
    "LoadedSuite",
    "SuiteLoadError",
    "load_suite",
]
