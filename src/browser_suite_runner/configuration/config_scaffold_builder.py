"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "suite-config.yaml"
OPTIONAL_PLACEHOLDER = "<OPTIONAL>"

_CONFIG_SCAFFOLD_TEMPLATE = """# Suite configuration template for browser-suite-runner.
# Every section is optional. <OPTIONAL> placeholders are treated as unset;
# omitted values fall back to the defaults shown below.

browser:
  # One of chromium, firefox, webkit, chrome, edge (default: chromium).
  name: "chromium"
  # Relative URLs in navigate steps are resolved against base_url.
  base_url: "<OPTIONAL>"

execution:
  # Maximum number of browser sessions doing work at the same time.
  parallelism: 4
  # Abort the suite when no run reports progress for this long.
  idle_timeout_seconds: 600
  # Relative paths resolve against this file's directory.
  screenshot_dir: "screenshots"

results:
  # Directory for the results workbook; leave unset to skip writing it.
  output_dir: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML suite configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder suite configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Suite configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
