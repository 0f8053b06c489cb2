"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from browser_suite_runner.configuration.loader import ConfigurationError, load_configuration
from browser_suite_runner.configuration.runtime_settings import BrowserSettings


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_none_path_yields_defaults() -> None:
    configuration = load_configuration(None)

    assert configuration.path is None
    assert configuration.browser.name == "chromium"
    assert configuration.browser.base_url is None
    assert configuration.execution.parallelism == 4
    assert configuration.execution.idle_timeout_seconds == 600
    assert configuration.results.output_dir is None


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "suite-config.yaml",
        """
browser:
  name: Firefox
  base_url: "https://shop.example.com/"
execution:
  parallelism: 2
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.browser.name == "firefox"
    assert configuration.browser.base_url == "https://shop.example.com/"
    assert configuration.browser == BrowserSettings(
        name="firefox", base_url="https://shop.example.com/"
    )
    assert configuration.execution.parallelism == 2
    assert configuration.execution.screenshot_dir == (tmp_path / "screenshots").resolve()
    assert configuration.results.output_dir is None


def test_loads_json_configuration_and_resolves_relative_paths(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    config_path = _write_file(
        config_dir / "suite-config.json",
        json.dumps(
            {
                "execution": {"screenshot_dir": "../shots", "idle_timeout_seconds": 30},
                "results": {"output_dir": "out"},
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.execution.screenshot_dir == (tmp_path / "shots").resolve()
    assert configuration.execution.idle_timeout_seconds == 30
    assert configuration.results.output_dir == (config_dir / "out").resolve()


def test_absolute_paths_are_kept(tmp_path: Path) -> None:
    output_dir = tmp_path / "absolute-results"
    config_path = _write_file(
        tmp_path / "suite-config.yaml",
        f"results:\n  output_dir: {json.dumps(str(output_dir))}\n",
    )

    assert load_configuration(config_path).results.output_dir == output_dir


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    configuration = load_configuration(_write_file(tmp_path / "empty.yaml", ""))

    assert configuration.browser.name == "chromium"


def test_optional_placeholders_are_treated_as_unset(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "suite-config.yaml",
        'browser:\n  base_url: "<OPTIONAL>"\nresults:\n  output_dir: "<OPTIONAL>"\n',
    )

    configuration = load_configuration(config_path)

    assert configuration.browser.base_url is None
    assert configuration.results.output_dir is None


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "broken.yaml", "browser: [unterminated\n")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_configuration(config_path)


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "list.yaml", "- one\n- two\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(config_path)


def test_non_mapping_section_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "section.yaml", "execution: fast\n")

    with pytest.raises(ConfigurationError, match="section 'execution' must be a mapping"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("browser:\n  name: netscape\n", "browser.name must be one of"),
        ("browser:\n  name: ''\n", "browser.name must not be empty"),
        ("browser:\n  name: 3\n", "browser.name must be a string"),
        ("browser:\n  base_url: [a]\n", "browser.base_url must be a string"),
        (
            "execution:\n  idle_timeout_seconds: 1.5\n",
            "execution.idle_timeout_seconds must be an integer",
        ),
        ("execution:\n  parallelism: true\n", "execution.parallelism must be an integer"),
        ("execution:\n  parallelism: 0\n", "execution.parallelism must be greater than zero"),
        ("execution:\n  screenshot_dir: 3\n", "execution.screenshot_dir must be a string"),
        ("results:\n  output_dir: [a]\n", "results.output_dir must be a string"),
    ],
)
def test_invalid_values_name_the_field(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "suite-config.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
