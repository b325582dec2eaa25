"""Summary command for haricot CLI."""

from __future__ import annotations

from dataclasses import replace
from typing import Annotated

import typer

from haricot.cli.common import get_state, reporting_errors


def summary(
    ctx: typer.Context,
    ecs: Annotated[
        bool,
        typer.Option("--ecs", help="Hide query strings and headers that are noise when analysing ECS traffic"),
    ] = False,
    with_query_string: Annotated[
        bool,
        typer.Option(
            "--with-query-string",
            help="Print URLs including their query string (query pairs are listed either way)",
        ),
    ] = False,
) -> None:
    """Show a summary of the entries.

    Args:
        ctx: Typer context holding the HAR file and settings
        ecs: Enable the ECS exclude lists
        with_query_string: Keep the query string on the URL line

    Example:
        haricot -f capture.har summary
        haricot -f capture.har summary --ecs --with-query-string
    """
    from haricot.analysis import overview

    state = get_state(ctx)
    settings = state.settings
    if ecs:
        settings = replace(settings, use_ecs_excludes=True)
    if with_query_string:
        settings = replace(settings, short_url=False)
    query_excludes, header_excludes = settings.overview_excludes()

    with reporting_errors(state):
        doc = state.load()
        lines = overview(doc, settings.short_url, query_excludes, header_excludes)
        typer.echo("\n".join(lines))
