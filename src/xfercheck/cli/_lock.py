"""The lock command."""

from __future__ import annotations

import json

import click

from ..exceptions import ValidationError
from ..shape import check_lock_syntax
from ._helpers import main, _fail, _format_option, _status


@main.command()
@click.argument("args", nargs=-1, required=True)
@click.option("--clear", "-c", is_flag=True, default=False,
              help="Clear the stored object lock configuration.")
@_format_option
@click.pass_context
def lock(ctx, args, clear, fmt):
    """Check an object lock configuration request.

    \b
    Usage:
        xfercheck lock TARGET                          # get
        xfercheck lock TARGET governance|compliance N  # set
        xfercheck lock --clear TARGET                  # clear

    VALIDITY is Nd (days) or Ny (years), e.g. 10d or 3y.
    """
    try:
        req = check_lock_syntax(list(args), clear=clear)
    except ValidationError as exc:
        _fail(exc)
    _status(ctx, f"lock {req.action} on {req.target}")

    if fmt == "json":
        click.echo(json.dumps({
            "status": "success",
            "target": req.target,
            "action": req.action,
            "mode": str(req.mode) if req.mode is not None else "",
            "validity": req.validity_str,
        }, indent=1))
    elif req.action == "set":
        click.echo(f"{req.mode} mode is enabled for {req.validity_str} on {req.target}")
    elif req.action == "clear":
        click.echo(f"Object lock configuration will be cleared on {req.target}")
    else:
        click.echo(f"Object lock configuration will be read from {req.target}")
