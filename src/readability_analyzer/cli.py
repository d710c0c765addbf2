from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path

import typer

from .report import (
    PROMPT_TEXT,
    format_statistics,
    parse_selector,
    render_selection,
    report_to_dict,
)
from .scoring import build_report
from .text_stats import compute_text_statistics

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Readability Analyzer CLI.", add_completion=False)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@app.command()
def analyze(
    input_path: Path = typer.Argument(..., help="Plain-text document to analyze."),
    metric: str | None = typer.Option(
        None,
        "--metric",
        "-m",
        help="Score to calculate (ARI, FK, SMOG, CL, all); skips the prompt.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Emit every score as a JSON document instead."
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level", case_sensitive=False
    ),
) -> None:
    """Report text statistics and readability scores for INPUT_PATH."""
    logging.basicConfig(level=log_level.value)

    # A missing or unreadable file is reported and analyzed as empty text.
    text = _read_text(input_path, err=json_output)
    stats = compute_text_statistics(text)

    if json_output:
        payload = report_to_dict(build_report(stats))
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(format_statistics(text, stats))

    selector = metric
    if selector is None:
        answer = typer.prompt(PROMPT_TEXT, default="", show_default=False)
        selector = parse_selector(answer)

    for line in render_selection(stats, selector):
        typer.echo(line)


def main() -> None:
    app()


def _read_text(path: Path, err: bool = False) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Unable to read %s: %s", path, exc)
        typer.echo("No such file", err=err)
        typer.echo(str(exc), err=err)
        return ""


if __name__ == "__main__":
    main()
