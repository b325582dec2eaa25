"""Body command for haricot CLI."""

from __future__ import annotations

from typing import Annotated

import typer

from haricot.analysis.body import BodyKind
from haricot.cli.common import get_state, reporting_errors


def body(
    ctx: typer.Context,
    num: Annotated[
        int,
        typer.Argument(help="Get body of this entry (0-based)"),
    ],
    which: Annotated[
        BodyKind,
        typer.Argument(help="Get body of request 'req' or response 'resp'"),
    ],
    ecs: Annotated[
        bool,
        typer.Option("--ecs", help="Expand percent-encoded DevicePrivateData into JSON"),
    ] = False,
) -> None:
    """Get body data.

    Prints the raw request or response body of one entry. A request without
    a body prints a notice instead and still exits 0.

    Args:
        ctx: Typer context holding the HAR file and settings
        num: Entry number
        which: Request or response body
        ecs: Expand private data

    Example:
        haricot -f capture.har body 3 resp
        haricot -f capture.har body 0 req --ecs
    """
    from haricot.analysis import extract_body

    state = get_state(ctx)
    expand_private = ecs or state.settings.expand_private

    with reporting_errors(state):
        doc = state.load()
        result = extract_body(doc, num, which, expand_private=expand_private)
        typer.echo(str(result))
