"""Suite file loader service."""

from __future__ import annotations

import importlib.util
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .run_tree import Group, Leaf, RunNode

if TYPE_CHECKING:
    from browser_suite_runner.session_adapters.browser_session import SessionFactory

SUITE_ATTRIBUTE = "suite"
SESSION_FACTORY_ATTRIBUTE = "open_session"


class SuiteLoadError(Exception):
    """Raised when a suite file cannot be loaded."""


@dataclass(frozen=True)
class LoadedSuite:
    """Run tree and session factory declared by a suite file."""

    path: Path
    tree: RunNode
    session_factory: SessionFactory


def load_suite(suite_path: Path | str) -> LoadedSuite:
    """Import a suite file and return its run tree and session factory.

    The file must define `suite` (a `Leaf` or `Group`) and `open_session`
    (a callable taking `BrowserSettings` and returning a browser session).
    """
    path = Path(suite_path).resolve()
    if not path.exists():
        raise SuiteLoadError(f"Suite file not found: {path}")
    if path.suffix != ".py":
        raise SuiteLoadError(f"Suite file must be a Python module: {path}")

    module_name = f"_browser_suite_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise SuiteLoadError(f"Cannot import suite file: {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        raise SuiteLoadError(f"Failed to import suite file {path}: {exc}") from exc

    tree = getattr(module, SUITE_ATTRIBUTE, None)
    if not isinstance(tree, Leaf | Group):
        raise SuiteLoadError(
            f"Suite file {path} must define '{SUITE_ATTRIBUTE}' built with describe() or group()."
        )
    session_factory = getattr(module, SESSION_FACTORY_ATTRIBUTE, None)
    if not callable(session_factory):
        raise SuiteLoadError(
            f"Suite file {path} must define a callable '{SESSION_FACTORY_ATTRIBUTE}'."
        )
    return LoadedSuite(path=path, tree=tree, session_factory=session_factory)
