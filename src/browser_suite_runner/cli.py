"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

import click

from browser_suite_runner.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from browser_suite_runner.run_execution import (
    RunExecutionError,
    RunRequest,
    SuiteListener,
    execute_suite_run,
)
from browser_suite_runner.status_tracking import StatusSnapshot
from browser_suite_runner.suite_definition import (
    DispatchKey,
    SuiteLoadError,
    load_suite,
    select_runs,
)
from browser_suite_runner.summary_aggregation import Summary


class CliError(Exception):
    """Custom CLI error."""


class _EchoListener(SuiteListener):
    """Prints live status snapshots and finished runs."""

    def __init__(self, *, show_status: bool) -> None:
        self._show_status = show_status

    def on_status(self, snapshot: StatusSnapshot) -> None:
        if not self._show_status:
            return
        for key, status in snapshot:
            marker = "FAIL" if status.failed else "    "
            done = status.total - status.remaining
            click.echo(f"{marker} {key} [{done}/{status.total}] {status.next_step}", err=True)
        click.echo("", err=True)

    def on_screenshots(self, key: DispatchKey, paths: Sequence[str]) -> None:
        for path in paths:
            click.echo(f"screenshot {key}: {path}", err=True)

    def on_run_logged(self, key: DispatchKey, summary: Summary) -> None:
        click.echo(f"\n{key}\n{summary.output}")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="browser-suite-runner")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Browser automation suite runner."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML suite configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML suite configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list")
@click.option(
    "--suite",
    "suite_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the Python suite file",
)
@click.option(
    "--filter",
    "name_filter",
    required=False,
    help="Only list runs whose qualified name contains this text",
)
def list_runs(suite_path: str, name_filter: str | None) -> None:
    """List the dispatch keys a run would use."""
    try:
        suite = load_suite(suite_path)
    except SuiteLoadError as exc:
        raise CliError(str(exc)) from exc
    for key, run in select_runs(suite.tree, name_filter):
        click.echo(f"{key} ({len(run.steps)} steps)")


@cli.command(name="run")
@click.option(
    "--suite",
    "suite_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the Python suite file",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON suite configuration file",
)
@click.option(
    "--filter",
    "name_filter",
    required=False,
    help="Only run suites whose qualified name contains this text",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional directory for storing the results workbook",
)
@click.option(
    "--quiet",
    is_flag=True,
    default=False,
    help="Do not print live status snapshots.",
)
def run_suite(
    suite_path: str,
    config_path: str | None,
    name_filter: str | None,
    output_dir: str | None,
    quiet: bool,
) -> None:
    """Execute the runs defined in a suite file."""
    try:
        outcome = execute_suite_run(
            RunRequest(
                suite_path=suite_path,
                config_path=config_path,
                name_filter=name_filter,
                output_dir=output_dir,
            ),
            listener=_EchoListener(show_status=not quiet),
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(outcome.report_text)
    if outcome.workbook_path is not None:
        click.echo(str(outcome.workbook_path))
    click.get_current_context().exit(outcome.exit_code)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
