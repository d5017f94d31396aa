"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import json

import click

from ..exceptions import ValidationError
from ..shape import HostCapabilities, SourceAction, ValidationOutcome


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _capabilities(ctx) -> HostCapabilities:
    """Host capabilities, honoring --platform-permissions if given."""
    override = ctx.obj.get("platform_permissions")
    if override is None:
        return HostCapabilities.detect()
    return HostCapabilities(preserves_permissions=override)


def _fail(exc: ValidationError):
    """Turn a library rejection into a CLI error (exit code 1)."""
    raise click.ClickException(str(exc))


def _echo_outcome(outcome: ValidationOutcome, fmt: str):
    """Print an accepted plan as text or JSON."""
    if fmt == "json":
        click.echo(json.dumps(outcome.to_dict(), indent=1))
        return
    click.echo(f"shape: {outcome.shape}")
    for planned in outcome.plan:
        prefix = "=" if planned.action == SourceAction.SKIP else "+"
        click.echo(f"{prefix} {planned.location.url}")


def _store_platform(ctx, param, value):
    """Click callback: store --platform-permissions in the context."""
    ctx.ensure_object(dict)
    if value is not None:
        ctx.obj["platform_permissions"] = value
    return value


def _platform_option(f):
    """Shared --platform-permissions override for commands that check --preserve."""
    return click.option(
        "--platform-permissions/--no-platform-permissions", default=None,
        envvar="XFERCHECK_PLATFORM_PERMISSIONS",
        help="Whether the host keeps permission bits (default: auto-detect, "
             "or set XFERCHECK_PLATFORM_PERMISSIONS).",
        expose_value=False, callback=_store_platform,
    )(f)


def _format_option(f):
    return click.option(
        "--format", "fmt", type=click.Choice(["text", "json"]), default="text",
        help="Output format.",
    )(f)


def _retention_options(f):
    """Shared --retention-mode / --retention-duration options."""
    f = click.option("--retention-duration", "--rd", "retention_duration", default=None,
                     help="Retention duration, e.g. 30d or 1y.")(f)
    f = click.option("--retention-mode", "--rm", "retention_mode", default=None,
                     help="Retention mode: governance or compliance.")(f)
    return f


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.pass_context
def main(ctx, verbose):
    """xfercheck — validate copy, move, and lock requests before transfer.

    Each command stats its arguments, works out what kind of operation
    is being asked for, and either prints the plan or exits non-zero
    with the reason the request is not allowed.

    \b
    Quick start:
      xfercheck cp a.txt b.txt
      xfercheck cp -r photos/ backup/
      xfercheck mv a.txt b.txt dir/
      xfercheck lock https://play.min.io/bucket compliance 30d
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
