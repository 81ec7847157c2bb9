"""gest CLI - reads ``go test -json`` from stdin and prints a report."""

from __future__ import annotations

import io
import json
import sys
import time
from pathlib import Path
from typing import Any

import click
import structlog
from rich.console import Console

from gest import __version__
from gest.cli.render import render_report
from gest.config.loader import load_config
from gest.config.models import LoggingConfig
from gest.core.errors import ConfigError, CoverageProfileError
from gest.core.logging import configure_logging
from gest.core.progress import ProgressIndicator
from gest.testing.aggregator import consume
from gest.testing.coverage.gocov import read_profile
from gest.testing.coverage.models import TreeNode
from gest.testing.coverage.tree import build_coverage_tree

log = structlog.get_logger()


@click.command()
@click.version_option(version=__version__, prog_name="gest")
@click.option(
    "-c",
    "--coverprofile",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to coverage profile",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--no-progress", is_flag=True, help="Do not draw the progress line")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(coverprofile: Path | None, as_json: bool, no_progress: bool, verbose: bool) -> None:
    """Pretty-print `go test -json` output read from stdin.

    \b
    Example:
        go test -json -coverprofile=cover.out ./... | gest -c cover.out
    """
    start = time.perf_counter()
    configure_logging(LoggingConfig(level="DEBUG" if verbose else "WARNING"))

    overrides: dict[str, Any] = {}
    if no_progress:
        overrides["report"] = {"progress": False}
    if verbose:
        overrides["logging"] = {"level": "DEBUG"}
    try:
        config = load_config(**overrides)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    configure_logging(config.logging)

    stdin = sys.stdin
    if isinstance(stdin, io.TextIOWrapper):
        stdin.reconfigure(errors="replace")
    indicator = ProgressIndicator(
        enabled=config.report.progress and not as_json,
        width=config.report.progress_width,
    )
    with indicator:
        aggregator = consume(stdin, on_progress=indicator.update)
    summary = aggregator.finalize()

    root: TreeNode | None = None
    if coverprofile is not None:
        try:
            root = build_coverage_tree(read_profile(coverprofile))
        except CoverageProfileError as e:
            log.debug("coverage_profile_unreadable", **e.details)
            raise click.ClickException(str(e)) from e

    elapsed = time.perf_counter() - start

    if as_json:
        payload = summary.to_dict()
        if root is not None:
            payload["coverage"] = root.to_dict()
        payload["elapsed"] = round(elapsed, 3)
        click.echo(json.dumps(payload))
        return

    render_report(summary, Console(), root=root, elapsed=elapsed, config=config.report)


if __name__ == "__main__":
    cli()
