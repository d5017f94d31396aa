"""Per-shape legality checks for copy/move requests."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .._paths import contains
from ._classify import classify
from ._types import (
    Location,
    OperationRequest,
    PlannedSource,
    Rejection,
    RejectReason,
    Shape,
    SourceAction,
    ValidationOutcome,
)


RETENTION_MODE_FLAG = "retention-mode"
RETENTION_DURATION_FLAG = "retention-duration"


@dataclass(frozen=True)
class HostCapabilities:
    """What the host platform can represent.

    Attributes:
        preserves_permissions: Whether POSIX permission bits survive a
            ``--preserve`` copy on this host.
    """
    preserves_permissions: bool = True

    @classmethod
    def detect(cls) -> HostCapabilities:
        """Capabilities of the running interpreter's platform."""
        return cls(preserves_permissions=os.name != "nt")


class _Rejected(Exception):
    """Internal: unwinds to :func:`validate` with the first rejection."""

    def __init__(self, rejection: Rejection) -> None:
        super().__init__(rejection.message)
        self.rejection = rejection


def _reject(reason: RejectReason, message: str, location: str | None = None):
    raise _Rejected(Rejection(reason, message, location))


# ---------------------------------------------------------------------------
# Shared checks
# ---------------------------------------------------------------------------

def _check_target_bucket(target: Location) -> None:
    """A ``http(s)://host/`` target with no bucket is never a valid target."""
    if target.host and not (target.path or "").strip(target.separator):
        _reject(RejectReason.MISSING_BUCKET_NAME,
                f"Target `{target.url}` does not contain bucket name.", target.url)


def _check_retention(req: OperationRequest) -> None:
    if req.retention.incomplete:
        _reject(RejectReason.INCOMPLETE_RETENTION_PAIR,
                f"Both object retention flags `--{RETENTION_DURATION_FLAG}` "
                f"and `--{RETENTION_MODE_FLAG}` are required.")


def _check_single_source(req: OperationRequest) -> Location:
    if len(req.sources) != 1:
        _reject(RejectReason.INVALID_ARGUMENT_COUNT,
                "Invalid number of source arguments.")
    return req.sources[0]


def _check_source_is_file(src: Location) -> None:
    if not src.exists:
        detail = f": {src.error}" if src.error else ""
        _reject(RejectReason.SOURCE_NOT_REGULAR,
                f"Unable to stat source `{src.url}`{detail}.", src.url)
    if not src.is_file:
        _reject(RejectReason.SOURCE_NOT_REGULAR,
                f"Source `{src.url}` is not a file.", src.url)


def _check_target_is_folder(target: Location) -> None:
    """An existing target must be a folder; a missing one will be created."""
    if target.exists and not target.is_dir:
        _reject(RejectReason.TARGET_NOT_FOLDER,
                f"Target `{target.url}` is not a folder.", target.url)


def _check_folder_source(req: OperationRequest, src: Location) -> None:
    """Rules for a source that is an existing directory."""
    if not req.recursive:
        _reject(RejectReason.RECURSIVE_REQUIRED,
                f"To {req.operation} a folder requires --recursive flag.", src.url)
    if contains(src.url, req.target.url, src.separator):
        verb = "Moving" if req.is_move else "Copying"
        _reject(RejectReason.SELF_CONTAINMENT,
                f"{verb} a folder into itself is not allowed.", src.url)


def _check_platform(req: OperationRequest, capabilities: HostCapabilities) -> None:
    if req.preserve and not capabilities.preserves_permissions:
        _reject(RejectReason.UNSUPPORTED_ON_PLATFORM,
                "Permissions are not preserved on this platform.")


# ---------------------------------------------------------------------------
# Per-shape checks
# ---------------------------------------------------------------------------

def _check_file_to_file(req: OperationRequest) -> list[PlannedSource]:
    src = _check_single_source(req)
    _check_source_is_file(src)
    return [PlannedSource(src)]


def _check_file_to_folder(req: OperationRequest) -> list[PlannedSource]:
    src = _check_single_source(req)
    _check_source_is_file(src)
    _check_target_is_folder(req.target)
    return [PlannedSource(src)]


def _check_tree_to_folder(req: OperationRequest) -> list[PlannedSource]:
    src = _check_single_source(req)
    _check_target_is_folder(req.target)
    # A prefix that does not exist yet (e.g. from a glob) is skipped, not fatal.
    if not src.exists:
        return [PlannedSource(src, SourceAction.SKIP)]
    if src.is_dir:
        _check_folder_source(req, src)
    return [PlannedSource(src)]


def _check_many_to_folder(req: OperationRequest) -> list[PlannedSource]:
    _check_target_is_folder(req.target)
    plan: list[PlannedSource] = []
    for src in req.sources:
        if not src.exists:
            detail = f": {src.error}" if src.error else ""
            _reject(RejectReason.SOURCE_NOT_FOUND,
                    f"Unable to validate source `{src.url}`{detail}.", src.url)
        if src.is_dir:
            _check_folder_source(req, src)
        plan.append(PlannedSource(src))
    return plan


_SHAPE_CHECKS = {
    Shape.FILE_TO_FILE: _check_file_to_file,
    Shape.FILE_TO_FOLDER: _check_file_to_folder,
    Shape.TREE_TO_FOLDER: _check_tree_to_folder,
    Shape.MANY_TO_FOLDER: _check_many_to_folder,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate(
    req: OperationRequest,
    shape: Shape,
    *,
    capabilities: HostCapabilities | None = None,
) -> ValidationOutcome:
    """Check *req* against the rules for *shape*.

    Returns an accepted :class:`ValidationOutcome` with a per-source plan,
    or a rejected one carrying the first failure.  Performs no I/O.

    Checks run in this order: target bucket name, retention pair, the
    per-shape rules, then ``--preserve`` against *capabilities*
    (default: :meth:`HostCapabilities.detect`).
    """
    if capabilities is None:
        capabilities = HostCapabilities.detect()
    try:
        _check_target_bucket(req.target)
        _check_retention(req)
        plan = _SHAPE_CHECKS[shape](req)
        _check_platform(req, capabilities)
    except _Rejected as exc:
        return ValidationOutcome(shape=shape, rejection=exc.rejection)
    return ValidationOutcome(shape=shape, plan=plan)


def check_operation(
    req: OperationRequest,
    *,
    capabilities: HostCapabilities | None = None,
) -> ValidationOutcome:
    """Classify *req* and validate it against its shape."""
    shape = classify(req.sources, req.target)
    return validate(req, shape, capabilities=capabilities)
