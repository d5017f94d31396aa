"""xfercheck CLI — validate copy/move/lock requests."""

from ._helpers import main  # noqa: F401 — entry point

# Import command modules to register Click commands with the main group.
from . import _cp, _lock  # noqa: F401
