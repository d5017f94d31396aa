"""Data structures for classifying and validating copy/move requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .._paths import ensure_trailing_separator
from ..exceptions import ValidationError


class LocationKind(str, Enum):
    """Resolved kind of a location: ``MISSING``, ``FILE``, or ``DIRECTORY``."""
    MISSING = "missing"
    FILE = "file"
    DIRECTORY = "directory"

    def __str__(self) -> str:          # noqa: D105
        return self.value


@dataclass(frozen=True)
class Location:
    """A source or target argument with its stat result.

    Attributes:
        url: The argument as the user typed it.
        kind: :class:`LocationKind` reported by the stat client.
        separator: Path separator used for containment checks.
        host: Host part for ``http(s)://`` URLs, ``""`` for local paths.
        path: Path part of the URL (defaults to *url*).
        error: Stat failure text, if the stat call failed.
    """
    url: str
    kind: LocationKind = LocationKind.MISSING
    separator: str = "/"
    host: str = ""
    path: str | None = None
    error: str | None = None

    @property
    def exists(self) -> bool:
        return self.kind != LocationKind.MISSING

    @property
    def is_file(self) -> bool:
        return self.kind == LocationKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind == LocationKind.DIRECTORY

    @property
    def normalized(self) -> str:
        """The URL with exactly one trailing separator."""
        return ensure_trailing_separator(self.url, self.separator)


@dataclass(frozen=True)
class RetentionPair:
    """Object retention flags, which must be given together."""
    mode: str | None = None
    duration: str | None = None

    @classmethod
    def absent(cls) -> RetentionPair:
        return cls()

    @property
    def present(self) -> bool:
        return bool(self.mode) or bool(self.duration)

    @property
    def complete(self) -> bool:
        return bool(self.mode) and bool(self.duration)

    @property
    def incomplete(self) -> bool:
        """True when exactly one of mode/duration is set."""
        return self.present and not self.complete


@dataclass(frozen=True)
class OperationRequest:
    """A copy or move request, after every argument has been stat'ed.

    Attributes:
        sources: Source locations in argument order (at least one).
        target: The single target location.
        recursive: ``--recursive`` was given.
        is_move: ``mv`` rather than ``cp``; only changes message wording.
        preserve: ``--preserve`` (keep permission bits) was given.
        retention: Retention mode/duration flags.
    """
    sources: tuple[Location, ...]
    target: Location
    recursive: bool = False
    is_move: bool = False
    preserve: bool = False
    retention: RetentionPair = field(default_factory=RetentionPair)

    def __post_init__(self) -> None:
        if not self.sources:
            raise ValueError("At least one source is required")
        if not isinstance(self.sources, tuple):
            object.__setattr__(self, "sources", tuple(self.sources))

    @property
    def operation(self) -> str:
        return "move" if self.is_move else "copy"


class Shape(str, Enum):
    """Structural category of a copy/move request."""
    FILE_TO_FILE = "file-to-file"
    FILE_TO_FOLDER = "file-to-folder"
    TREE_TO_FOLDER = "tree-to-folder"
    MANY_TO_FOLDER = "many-to-folder"

    def __str__(self) -> str:          # noqa: D105
        return self.value


class RejectReason(str, Enum):
    """Why a request was rejected."""
    INVALID_ARGUMENT_COUNT = "invalid-argument-count"
    SOURCE_NOT_REGULAR = "source-not-regular"
    SOURCE_NOT_FOUND = "source-not-found"
    TARGET_NOT_FOLDER = "target-not-folder"
    RECURSIVE_REQUIRED = "recursive-required"
    SELF_CONTAINMENT = "self-containment"
    INCOMPLETE_RETENTION_PAIR = "incomplete-retention-pair"
    UNSUPPORTED_ON_PLATFORM = "unsupported-on-platform"
    MISSING_BUCKET_NAME = "missing-bucket-name"
    INVALID_RETENTION = "invalid-retention"

    def __str__(self) -> str:          # noqa: D105
        return self.value


@dataclass(frozen=True)
class Rejection:
    """A terminal validation failure.

    Attributes:
        reason: :class:`RejectReason` value.
        message: Human-readable message.
        location: The offending argument, if there is one.
    """
    reason: RejectReason
    message: str
    location: str | None = None


class SourceAction(str, Enum):
    """What the transfer engine should do with a source: ``TRANSFER`` or ``SKIP``."""
    TRANSFER = "transfer"
    SKIP = "skip"

    def __str__(self) -> str:          # noqa: D105
        return self.value


@dataclass
class PlannedSource:
    location: Location
    action: SourceAction = SourceAction.TRANSFER


@dataclass
class ValidationOutcome:
    """Result of validating one :class:`OperationRequest`.

    Either accepted (``rejection is None``) with a per-source plan, or
    rejected with the first :class:`Rejection` found.
    """
    shape: Shape
    plan: list[PlannedSource] = field(default_factory=list)
    rejection: Rejection | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @property
    def skipped(self) -> list[Location]:
        """Sources that do not exist yet and will not be transferred."""
        return [p.location for p in self.plan if p.action == SourceAction.SKIP]

    def raise_for_rejection(self) -> ValidationOutcome:
        """Raise :class:`~xfercheck.ValidationError` if rejected, else return self."""
        if self.rejection is not None:
            raise ValidationError(self.rejection)
        return self

    def to_dict(self) -> dict:
        result: dict = {
            "status": "success" if self.accepted else "error",
            "shape": str(self.shape),
            "sources": [
                {"url": p.location.url, "kind": str(p.location.kind), "action": str(p.action)}
                for p in self.plan
            ],
        }
        if self.rejection is not None:
            result["error"] = {
                "reason": str(self.rejection.reason),
                "message": self.rejection.message,
                "location": self.rejection.location,
            }
        return result
