"""Object-lock retention mode/validity parsing for the ``lock`` command."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ..exceptions import ValidationError
from ._types import Rejection, RejectReason


class RetentionMode(str, Enum):
    """Object-lock retention mode: ``GOVERNANCE`` or ``COMPLIANCE``."""
    GOVERNANCE = "GOVERNANCE"
    COMPLIANCE = "COMPLIANCE"

    def __str__(self) -> str:          # noqa: D105
        return self.value


class ValidityUnit(str, Enum):
    """Unit of a retention validity: ``DAYS`` (``d``) or ``YEARS`` (``y``)."""
    DAYS = "d"
    YEARS = "y"

    def __str__(self) -> str:          # noqa: D105
        return self.value


def _invalid(message: str, location: str | None = None) -> ValidationError:
    return ValidationError(Rejection(RejectReason.INVALID_RETENTION, message, location))


def parse_mode(text: str) -> RetentionMode:
    """Parse a retention mode, case-insensitively."""
    try:
        return RetentionMode(text.upper())
    except ValueError:
        raise _invalid(f"Invalid retention mode '{text}' (use governance or compliance).")


def parse_validity(text: str) -> tuple[int, ValidityUnit]:
    """Parse a validity like ``30d`` or ``3y`` into ``(count, unit)``."""
    if len(text) < 2:
        raise _invalid(f"Invalid retention validity '{text}' (use Nd or Ny, e.g. 10d, 3y).")
    count_str, unit_str = text[:-1], text[-1].lower()
    if not (count_str.isascii() and count_str.isdigit()):
        raise _invalid(f"Invalid retention validity '{text}' (use Nd or Ny, e.g. 10d, 3y).")
    try:
        unit = ValidityUnit(unit_str)
    except ValueError:
        raise _invalid(f"Invalid retention validity unit '{text[-1]}' (use d or y).")
    return int(count_str), unit


@dataclass(frozen=True)
class LockRequest:
    """A parsed ``lock`` invocation.

    ``mode`` is ``None`` when the command only reads (or, with ``clear``,
    clears) the configuration.
    """
    target: str
    mode: RetentionMode | None = None
    validity: int = 0
    unit: ValidityUnit | None = None
    clear: bool = False

    @property
    def action(self) -> str:
        if self.clear:
            return "clear"
        if self.mode is not None:
            return "set"
        return "get"

    @property
    def validity_str(self) -> str:
        return f"{self.validity}{self.unit}" if self.unit is not None else ""


def check_lock_syntax(args: Sequence[str], *, clear: bool = False) -> LockRequest:
    """Validate ``lock TARGET [MODE VALIDITY]`` arguments.

    One argument reads (or clears) the configuration; three set it.
    ``clear`` is only accepted with the target alone.
    """
    if len(args) == 1:
        return LockRequest(target=args[0], clear=clear)
    if len(args) == 3:
        target, mode_str, validity_str = args
        if clear:
            raise ValidationError(Rejection(
                RejectReason.INVALID_ARGUMENT_COUNT,
                "The clear flag must be passed with the target alone.", target,
            ))
        mode = parse_mode(mode_str)
        validity, unit = parse_validity(validity_str)
        return LockRequest(target=target, mode=mode, validity=validity, unit=unit)
    raise ValidationError(Rejection(
        RejectReason.INVALID_ARGUMENT_COUNT,
        "lock requires TARGET or TARGET MODE VALIDITY.",
    ))
