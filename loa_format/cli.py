#!/usr/bin/env python3
"""Command-line interface for the card catalog generator."""

import logging
import os
from pathlib import Path

from lxml import etree
import typer

from .pipeline import run_pipeline
from .utils import LOGGER_NAME, PipelineError


app = typer.Typer(help="Render a card dataset as a plain-text catalog.")

LOG_LEVEL_ENV = "LOA_FORMAT_LOG_LEVEL"


def _configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV)
    if not level:
        return
    try:
        logging.getLogger(LOGGER_NAME).setLevel(level.upper())
    except ValueError:
        raise typer.BadParameter(f"Unknown log level in {LOG_LEVEL_ENV}: {level}") from None


@app.command()
def render(
    input_dir: Path = typer.Argument(..., metavar="INPUT_DIR", help="Directory holding cards.xml, setinfo.xml and meta.xml."),
    output_path: Path = typer.Argument(..., metavar="OUTPUT_PATH", help="Text file to write the catalog to."),
) -> None:
    """Render the dataset in INPUT_DIR to OUTPUT_PATH."""

    _configure_logging()

    source_dir = input_dir.expanduser().resolve()
    if not source_dir.is_dir():
        typer.echo(f"Input directory not found: {source_dir}", err=True)
        raise typer.Exit(code=1)

    try:
        written = run_pipeline(source_dir, output_path.expanduser())
    except (PipelineError, OSError, etree.XMLSyntaxError) as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Saved: {written}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
