"""CLI orchestration integration tests."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
from browser_suite_runner.cli import CliError, cli, main
from openpyxl import load_workbook

SUITE_SOURCE = """
from browser_suite_runner.step_results import click, expect_title, navigate
from browser_suite_runner.suite_definition import describe, group


class TitleOnlySession:
    def navigate(self, url):
        pass

    def click(self, selector):
        pass

    def fill(self, selector, text):
        pass

    def title(self):
        return "Home"

    def current_url(self):
        return "https://example.com/"

    def text_of(self, selector):
        return ""

    def screenshot(self, path):
        return str(path)

    def close(self):
        pass


def open_session(settings):
    return TitleOnlySession()


suite = group(
    "Site",
    [
        describe("Home", [navigate("/"), expect_title("Home")]),
        describe("Menu", [click("#menu"), expect_title("{menu_title}")]),
    ],
)
"""


def _write_suite(tmp_path: Path, menu_title: str = "Home") -> Path:
    path = tmp_path / "site_suite.py"
    path.write_text(SUITE_SOURCE.replace("{menu_title}", menu_title), encoding="utf-8")
    return path


def test_generate_config_command_writes_placeholder_file_with_default_name(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-config"])
        output_path = Path("suite-config.yaml").resolve()

        assert result.exit_code == 0
        assert output_path.exists()
        content = output_path.read_text(encoding="utf-8")
        assert "browser:" in content
        assert "execution:" in content
        assert "results:" in content
        assert str(output_path) in result.output


def test_generate_config_command_refuses_to_overwrite(tmp_path: Path) -> None:
    output_path = tmp_path / "custom.yaml"
    output_path.write_text("browser: {}\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code != 0
    assert isinstance(result.exception, CliError)
    assert "already exists" in str(result.exception)


def test_list_command_prints_dispatch_keys(tmp_path: Path) -> None:
    suite_path = _write_suite(tmp_path)

    result = CliRunner().invoke(cli, ["list", "--suite", str(suite_path)])
    filtered = CliRunner().invoke(cli, ["list", "--suite", str(suite_path), "--filter", "Menu"])

    assert result.exit_code == 0
    assert "0 - Site / Home (2 steps)" in result.output
    assert "1 - Site / Menu (2 steps)" in result.output
    assert filtered.exit_code == 0
    assert filtered.output.strip() == "0 - Site / Menu (2 steps)"


def test_run_command_exits_zero_when_everything_passes(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["run", "--suite", str(_write_suite(tmp_path)), "--quiet"])

    assert result.exit_code == 0
    assert "0 - Site / Home" in result.output
    assert "✅  Title is 'Home'" in result.output
    assert "OK. 4 assertions passed." in result.output
    assert "[0/2]" not in result.output


def test_run_command_exits_one_on_failure_and_writes_workbook(tmp_path: Path) -> None:
    suite_path = _write_suite(tmp_path, menu_title="Menu")
    output_dir = tmp_path / "results"

    result = CliRunner().invoke(
        cli,
        ["run", "--suite", str(suite_path), "--output-dir", str(output_dir)],
    )

    assert result.exit_code == 1
    assert "❌  Title is 'Menu'" in result.output
    assert "Failed: 1 assertions failed, 3 assertions passed." in result.output
    workbooks = list(output_dir.glob("site_suite-results-*.xlsx"))
    assert len(workbooks) == 1
    assert str(workbooks[0]) in result.output
    assert "Runs" in load_workbook(workbooks[0]).sheetnames


def test_main_returns_run_exit_code(tmp_path: Path, capsys) -> None:
    exit_code = main(["run", "--suite", str(_write_suite(tmp_path, menu_title="Menu")), "--quiet"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed: 1 assertions failed" in captured.out


def test_run_command_reports_invalid_config(tmp_path: Path) -> None:
    config_path = tmp_path / "suite-config.yaml"
    config_path.write_text("browser:\n  name: netscape\n", encoding="utf-8")

    result = CliRunner().invoke(
        cli,
        ["run", "--suite", str(_write_suite(tmp_path)), "--config", str(config_path)],
    )

    assert result.exit_code != 0
    assert isinstance(result.exception, CliError)
    assert "browser.name must be one of" in str(result.exception)
