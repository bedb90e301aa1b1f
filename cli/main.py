"""linkgrab CLI — fetch a page and print it as a markdown link or JSON.

Usage:
    python cli/main.py --url https://example.com
    python cli/main.py --url https://example.com --style link
    python cli/main.py --url https://example.com --format json

Exits 0 and prints the rendered page on success.  Any scrape failure is
reported on stderr and exits 1; nothing is written to stdout in that case.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkgrab.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from cli.rendering import OutputFormat, Style, render
from linkgrab import __version__
from linkgrab.config import settings
from linkgrab.scraper import ScraperError, grab_url

app = typer.Typer(
    name="linkgrab",
    help="Fetch a web page and render its title, URL and description.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"linkgrab {__version__}")
        raise typer.Exit()


@app.command()
def grab(
    url: str = typer.Option(..., "--url", "-u", help="URL of the page to grab."),
    style: Style = typer.Option(Style.full, "--style", "-s", help="Markdown shape: full | link."),
    output_format: OutputFormat = typer.Option(
        OutputFormat.markdown, "--format", "-f", help="Output format: markdown | json."
    ),
    timeout: float = typer.Option(
        settings.request_timeout, "--timeout", "-t", help="Total request timeout in seconds, body download included."
    ),
    user_agent: str = typer.Option(
        settings.user_agent, "--user-agent", help="User-Agent header sent with the request."
    ),
    cleanup_tracking: bool = typer.Option(
        settings.cleanup_tracking,
        "--cleanup-tracking/--no-cleanup-tracking",
        help="Remove tracking query parameters (utm_source, etc.).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Grab a single page and print it."""
    _configure_logging(verbose)

    try:
        fetch_config = settings.fetch_config(timeout=timeout, user_agent=user_agent)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    cleanup_config = settings.cleanup_config(enabled=cleanup_tracking)

    try:
        record = grab_url(url, fetch_config, cleanup_config)
    except ScraperError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(render(record, style, output_format))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
