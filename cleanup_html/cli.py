#!/usr/bin/env python3
# /// script
# requires-python = ">=3.12"
# dependencies = ["beautifulsoup4", "lxml", "click", "servicelayer"]
# ///

"""
SPDX-License-Identifier: LicenseRef-NonCommercial-Only
© 2025 github.com/defmon3 — Non-commercial use only. Commercial use requires permission.

Format docstrings according to PEP 287
File: cli.py
"""

import logging
import sys
from pathlib import Path

import click
from servicelayer.logs import configure_logging

from cleanup_html.worker import DEFAULT_THREADS, output_path_for, process_directory, process_file

log = logging.getLogger(__name__)


@click.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, path_type=Path))
@click.argument("output_path", metavar="[OUTPUT]", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--threads",
    default=DEFAULT_THREADS,
    show_default=True,
    type=click.IntRange(min=1),
    help="Files cleaned in parallel when INPUT is a directory.",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def cli(input_path: Path, output_path: Path | None, threads: int, verbose: bool) -> None:
    """
    Clean an HTML file, or every ``.html`` file in a directory.

    Removes ``class`` and ``id`` attributes, ``<style>``, ``<meta>``,
    ``<title>`` and ``<head>`` elements, empty elements and whitespace between
    tags, and replaces Google redirect links with their target.

    :param input_path: File or directory to clean.
    :param output_path: Output file; only valid for a single input file.
                        Defaults to ``<name>_processed.html`` next to the input.
    :param threads: Worker threads for directory mode.
    :param verbose: Log at DEBUG instead of INFO.
    :workflow:
        1. Configure logging.
        2. Clean the file, or every ``.html`` file in the directory.
        3. Exit with status 1 if any file failed.
    """
    configure_logging(level=logging.DEBUG if verbose else logging.INFO)

    if input_path.is_file():
        target = output_path or output_path_for(input_path)
        if not process_file(input_path, target):
            click.echo(f"Failed to process {input_path}", err=True)
            sys.exit(1)
        click.echo(f"Processed: {input_path} -> {target}")
        return

    if not input_path.is_dir():
        raise click.ClickException(f"Invalid input path {input_path}. Must be a file or directory.")
    if output_path is not None:
        raise click.UsageError("OUTPUT can only be given when INPUT is a file.")

    result = process_directory(input_path, threads=threads)
    for path in result.processed:
        click.echo(f"Processed: {path} -> {output_path_for(path)}")
    for path in result.failed:
        click.echo(f"Failed to process {path}", err=True)
    log.debug("Directory %s done, %d failed.", input_path, len(result.failed))
    if not result.ok:
        sys.exit(1)


if __name__ == "__main__":
    cli()
