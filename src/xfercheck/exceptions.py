"""Exceptions for xfercheck."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .shape._types import Rejection


class ValidationError(ValueError):
    """Raised when a copy/move/lock request is rejected.

    The :class:`~xfercheck.shape.Rejection` that caused it is available as
    ``exc.rejection``; ``str(exc)`` is the human-readable message.
    """

    def __init__(self, rejection: Rejection) -> None:
        super().__init__(rejection.message)
        self.rejection = rejection

    @property
    def reason(self):
        """Shortcut for ``self.rejection.reason``."""
        return self.rejection.reason
