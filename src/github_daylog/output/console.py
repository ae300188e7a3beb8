"""Rich console for diagnostics.

Everything here goes to stderr so that stdout carries only the markdown report.
"""

import logging

from rich.console import Console as RichConsole
from rich.logging import RichHandler


class Console:
    """Wrapper for rich stderr output."""

    def __init__(self, verbose: bool = False):
        self.console = RichConsole(stderr=True)
        self.verbose = verbose

    def print_verbose(self, *args, **kwargs):
        """Print only in verbose mode."""
        if self.verbose:
            self.console.print(*args, **kwargs)

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"[red]Error:[/red] {message}", highlight=False)

    def print_warning(self, message: str):
        """Print warning message."""
        self.console.print(f"[yellow]Warning:[/yellow] {message}", highlight=False)

    def print_usage(self):
        """Print guidance for a run missing its required options."""
        self.console.print(
            "Please provide a GitHub personal access token and date.\n"
            "Example: github-daylog --token YOUR_ACCESS_TOKEN --date 2023-01-01\n"
            "Get your personal access token here: https://github.com/settings/tokens\n"
            "Date should be in the format YYYY-MM-DD.\n"
            "Note: GitHub API requests are subject to rate limits.\n"
            "For more information, refer to: "
            "https://docs.github.com/en/rest/overview/resources-in-the-rest-api#rate-limiting",
            highlight=False,
            markup=False,
            soft_wrap=True,
        )

    def configure_logging(self) -> None:
        """Route log records to this console (DEBUG when verbose, else WARNING)."""
        logging.basicConfig(
            level=logging.DEBUG if self.verbose else logging.WARNING,
            format="%(message)s",
            handlers=[
                RichHandler(
                    console=self.console,
                    show_time=False,
                    show_path=self.verbose,
                    markup=False,
                )
            ],
            force=True,
        )
