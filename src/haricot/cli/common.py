"""Shared state, logging setup and error reporting for CLI commands."""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

import typer

from haricot.document import Document, decode
from haricot.errors import HaricotError
from haricot.settings import Settings

_LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by verbosity.

    Args:
        verbosity: 0=WARNING, 1=INFO, 2 or more=DEBUG
    """
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(stream=sys.stderr, level=level, format=LOG_FORMAT, force=True)


@dataclass
class AppState:
    """Values collected by the top-level callback for subcommands.

    Attributes:
        har_file: HAR file given with --file
        settings: Merged settings
        start_time: Monotonic time the command started
    """

    har_file: Path
    settings: Settings
    start_time: float = field(default_factory=time.monotonic)

    def elapsed(self) -> str:
        return f"{time.monotonic() - self.start_time:.3f}s"

    def load(self) -> Document:
        _LOGGER.info("Reading HAR file: %s", self.har_file)
        return decode(self.har_file)


def get_state(ctx: typer.Context) -> AppState:
    state = ctx.find_root().obj
    if not isinstance(state, AppState):
        typer.echo("Error: Provide a HAR file with --file", err=True)
        raise typer.Exit(1)
    return state


@contextmanager
def reporting_errors(state: AppState) -> Iterator[None]:
    """Turn haricot errors into an error message and exit code 1."""
    try:
        yield
    except HaricotError as e:
        _LOGGER.error("Application error: %s (time taken %s)", e, state.elapsed())
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    _LOGGER.info("Finished in %s", state.elapsed())
