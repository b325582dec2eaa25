"""Entries command for haricot CLI."""

from __future__ import annotations

import typer

from haricot.cli.common import get_state, reporting_errors


def entries(ctx: typer.Context) -> None:
    """Count entries."""
    from haricot.analysis import count_entries

    state = get_state(ctx)
    with reporting_errors(state):
        typer.echo(count_entries(state.load()))
