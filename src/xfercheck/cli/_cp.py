"""The cp and mv commands."""

from __future__ import annotations

import click

from ..client import LocalStatClient, resolve_locations
from ..exceptions import ValidationError
from ..shape import OperationRequest, RetentionPair, check_operation
from ._helpers import (
    main,
    _capabilities,
    _echo_outcome,
    _fail,
    _format_option,
    _platform_option,
    _retention_options,
    _status,
)


def _copy_options(f):
    """Options shared by cp and mv."""
    f = _platform_option(f)
    f = _format_option(f)
    f = _retention_options(f)
    f = click.option("--preserve", "-a", is_flag=True, default=False,
                     help="Preserve filesystem attributes (mode, ownership, timestamps).")(f)
    f = click.option("--recursive", "-r", is_flag=True, default=False,
                     help="Copy/move folders recursively.")(f)
    f = click.argument("args", nargs=-1, required=True)(f)
    return f


def _check_copy(ctx, args, *, is_move, recursive, preserve,
                retention_mode, retention_duration, fmt):
    cmd = "mv" if is_move else "cp"
    if len(args) < 2:
        raise click.UsageError(f"{cmd} requires at least two arguments (SRC... TARGET)")

    locations = resolve_locations(LocalStatClient(), list(args))
    for loc in locations:
        _status(ctx, f"stat {loc.url}: {loc.kind}" + (f" ({loc.error})" if loc.error else ""))

    req = OperationRequest(
        sources=tuple(locations[:-1]),
        target=locations[-1],
        recursive=recursive,
        is_move=is_move,
        preserve=preserve,
        retention=RetentionPair(retention_mode, retention_duration),
    )
    outcome = check_operation(req, capabilities=_capabilities(ctx))
    _status(ctx, f"shape: {outcome.shape}")
    try:
        outcome.raise_for_rejection()
    except ValidationError as exc:
        _fail(exc)
    for skipped in outcome.skipped:
        _status(ctx, f"Skipping `{skipped.url}` (does not exist yet)")
    _echo_outcome(outcome, fmt)


@main.command()
@_copy_options
@click.pass_context
def cp(ctx, args, recursive, preserve, retention_mode, retention_duration, fmt):
    """Check a copy of files and folders.

    The last argument is the target; all preceding arguments are sources.
    Folders require --recursive, and a folder cannot be copied into
    itself.  With several sources the target must be a folder (or not
    exist yet).

    \b
    Examples:
        xfercheck cp a.txt b.txt                 # file -> file
        xfercheck cp a.txt existing-dir          # file -> folder
        xfercheck cp -r photos backup            # folder -> folder
        xfercheck cp a.txt b.txt dir             # many -> folder
    """
    _check_copy(ctx, args, is_move=False, recursive=recursive, preserve=preserve,
                retention_mode=retention_mode, retention_duration=retention_duration,
                fmt=fmt)


@main.command()
@_copy_options
@click.pass_context
def mv(ctx, args, recursive, preserve, retention_mode, retention_duration, fmt):
    """Check a move of files and folders.

    Same rules as cp; only the wording of errors differs.
    """
    _check_copy(ctx, args, is_move=True, recursive=recursive, preserve=preserve,
                retention_mode=retention_mode, retention_duration=retention_duration,
                fmt=fmt)
