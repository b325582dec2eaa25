"""Main CLI entry point for haricot.

Provides commands for:
- summary: Per-entry overview of a HAR file
- entries: Number of entries
- body: Raw or expanded body of one entry
- [default]: Full overview with query strings and no filtering
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

try:
    import typer
except ImportError as e:
    raise ImportError("CLI dependencies not installed. Install with: pip install haricot[cli]") from e

from haricot.cli.body import body
from haricot.cli.common import AppState, configure_logging, reporting_errors
from haricot.cli.entries import entries
from haricot.cli.summary import summary
from haricot.errors import SettingsError

app = typer.Typer(
    name="haricot",
    help="Parse HAR files.",
    invoke_without_command=True,
)

app.command()(summary)
app.command()(entries)
app.command()(body)


def version_callback(value: bool) -> None:
    """Print version and exit.

    Args:
        value: True if --version flag was provided
    """
    if value:
        from haricot import __version__

        typer.echo(f"haricot {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    har_file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Path to HAR file"),
    ] = None,
    conf: Annotated[
        Path | None,
        typer.Option("--conf", "-c", help="Path to JSON config file"),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Verbosity level (default=WARNING, 'v'=INFO, 'vv'=DEBUG)",
        ),
    ] = 0,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    r"""Parse HAR files.

    \b
    Examples:
        haricot -f capture.har
        haricot -f capture.har summary --ecs
        haricot -f capture.har entries
        haricot -f capture.har body 2 resp --ecs
    """
    from haricot.settings import load_settings

    if har_file is None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()
        return

    try:
        settings = load_settings(conf)
    except SettingsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    configure_logging(max(verbose, settings.verbosity))
    state = AppState(har_file=har_file, settings=settings)
    ctx.obj = state

    if ctx.invoked_subcommand is None:
        from haricot.analysis import overview

        with reporting_errors(state):
            lines = overview(state.load(), short_url=False)
            typer.echo("\n".join(lines))


if __name__ == "__main__":
    app()
