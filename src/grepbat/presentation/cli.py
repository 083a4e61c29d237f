"""Command line entry point.

    ag --vimgrep pattern | xargs -d '\\n' grepbat
"""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from grepbat.application.invoker import ViewerInvoker
from grepbat.application.runner import process_arguments
from grepbat.domain.exceptions import CollaboratorError
from grepbat.infrastructure.bat_runner import BatRunner

EXIT_COLLABORATOR_FAILURE = 1

# Positional text only: "--foo" and "-h" are results, not options.
_CONTEXT_SETTINGS = {"ignore_unknown_options": True, "allow_interspersed_args": False}


@click.command(context_settings=_CONTEXT_SETTINGS, add_help_option=False)
@click.argument("results", nargs=-1, type=click.UNPROCESSED)
def main(results: tuple[str, ...]) -> None:
    """Show each PATH:LINE:COL:TEXT result with bat."""
    invoker = ViewerInvoker(BatRunner())
    try:
        process_arguments(results, invoker)
    except CollaboratorError as e:
        Console(stderr=True).print(f"[bold red]grepbat:[/bold red] {escape(str(e))}", highlight=False)
        raise SystemExit(EXIT_COLLABORATOR_FAILURE) from e
