"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .config_scaffold_builder import OPTIONAL_PLACEHOLDER
from .runtime_settings import BrowserSettings, Configuration, ExecutionSettings, ResultsSettings

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit", "chrome", "edge")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> Configuration:
    """Load and validate the configuration file; `None` yields the defaults."""
    if config_path is None:
        return Configuration()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    return Configuration(
        path=path,
        browser=_parse_browser_section(parsed.get("browser")),
        execution=_parse_execution_section(parsed.get("execution"), base_path),
        results=_parse_results_section(parsed.get("results"), base_path),
    )


def _parse_browser_section(value: Any) -> BrowserSettings:
    section = _optional_mapping(value, "browser")
    defaults = BrowserSettings()
    name = _require_non_empty_string(section.get("name", defaults.name), "browser.name").lower()
    if name not in SUPPORTED_BROWSERS:
        supported = ", ".join(SUPPORTED_BROWSERS)
        raise ConfigurationError(f"browser.name must be one of: {supported}.")
    return BrowserSettings(
        name=name,
        base_url=_optional_string(section.get("base_url"), "browser.base_url"),
    )


def _parse_execution_section(value: Any, base_path: Path) -> ExecutionSettings:
    section = _optional_mapping(value, "execution")
    defaults = ExecutionSettings()
    screenshot_dir = _optional_string(
        section.get("screenshot_dir", str(defaults.screenshot_dir)), "execution.screenshot_dir"
    )
    return ExecutionSettings(
        parallelism=_require_positive_int(
            section.get("parallelism", defaults.parallelism), "execution.parallelism"
        ),
        idle_timeout_seconds=_require_positive_int(
            section.get("idle_timeout_seconds", defaults.idle_timeout_seconds),
            "execution.idle_timeout_seconds",
        ),
        screenshot_dir=_resolve_path(base_path, screenshot_dir or str(defaults.screenshot_dir)),
    )


def _parse_results_section(value: Any, base_path: Path) -> ResultsSettings:
    section = _optional_mapping(value, "results")
    output_dir = _optional_string(section.get("output_dir"), "results.output_dir")
    return ResultsSettings(
        output_dir=_resolve_path(base_path, output_dir) if output_dir else None,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped == OPTIONAL_PLACEHOLDER:
        return None
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
