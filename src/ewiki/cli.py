"""CLI interface for ewiki.

Command-line tool for serving a directory of Markdown files as a wiki.
"""

import logging
import sys
from pathlib import Path

import click

from ewiki.config import Config


@click.group()
def cli() -> None:
    """ewiki - browse a directory of Markdown files as a wiki."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover ewiki.toml)",
)
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Wiki source directory (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--root",
    "-r",
    default=None,
    help="URL prefix the wiki is mounted at (overrides config, default: /wiki)",
)
@click.option(
    "--title",
    "-t",
    default=None,
    help="Page title (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every request resolution)",
)
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
    root: str | None,
    title: str | None,
    verbose: bool,
) -> None:
    """Start the wiki server."""
    from ewiki.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            source_dir=source_dir,
            root=root,
            title=title,
        )
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    wiki = config.wiki
    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {wiki.resolved_source_dir()}")
    click.echo(f"Wiki root: {wiki.normalized_root()}")
    if config.config_path:
        click.echo(f"Configuration: {config.config_path}")

    run_server(config)
