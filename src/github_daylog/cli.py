"""CLI interface for GitHub Daylog."""

import asyncio
import sys
from datetime import date
from typing import Optional

import typer

from github_daylog import __version__
from github_daylog.config import Config, parse_target_date
from github_daylog.exceptions import ConfigurationError, GitHubDaylogError
from github_daylog.output.console import Console
from github_daylog.sdk import GitHubDaylog

app = typer.Typer(
    name="github-daylog",
    help="Print a markdown list of your GitHub activity on a given day",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"github-daylog version {__version__}")
        raise typer.Exit()


@app.command()
def report(
    token: Optional[str] = typer.Option(
        None,
        "--token",
        "-t",
        help="GitHub personal access token",
    ),
    date_: Optional[str] = typer.Option(
        None,
        "--date",
        "-d",
        help="Date in YYYY-MM-DD format for which you want to retrieve GitHub activity",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Report the token owner's GitHub events on one day as markdown.

    Examples:
        github-daylog --token ghp_xxx --date 2024-05-01
        github-daylog --token ghp_xxx --date 2024-05-01 > today.md
    """
    console.verbose = verbose
    console.configure_logging()

    if not token or not date_:
        console.print_usage()
        raise typer.Exit(1)

    try:
        target_date = parse_target_date(date_)
        config = Config.from_env(token)
    except ConfigurationError as e:
        console.print_error(str(e))
        raise typer.Exit(1)

    try:
        asyncio.run(_run_report(config, target_date))
    except KeyboardInterrupt:
        console.print_warning("Cancelled")
        raise typer.Exit(1)
    except GitHubDaylogError as e:
        console.print_error(str(e))
        if verbose:
            console.console.print_exception()
        raise typer.Exit(1)


async def _run_report(config: Config, target_date: date) -> None:
    """Run the report asynchronously."""
    async with GitHubDaylog(config) as client:
        written = await client.write_report(target_date, sys.stdout)
    console.print_verbose(f"{written} events reported")


if __name__ == "__main__":
    app()
