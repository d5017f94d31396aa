"""Classify and validate multi-source, single-target copy/move requests.

:func:`classify` maps stat'ed arguments to one of four :class:`Shape`
values; :func:`validate` applies the rules for that shape and returns a
:class:`ValidationOutcome`.  Neither performs I/O.
"""

from ._types import (
    Location,
    LocationKind,
    OperationRequest,
    PlannedSource,
    Rejection,
    RejectReason,
    RetentionPair,
    Shape,
    SourceAction,
    ValidationOutcome,
)
from ._classify import classify
from ._validate import HostCapabilities, check_operation, validate
from ._retention import (
    LockRequest,
    RetentionMode,
    ValidityUnit,
    check_lock_syntax,
    parse_mode,
    parse_validity,
)

__all__ = [
    # Types
    "Location", "LocationKind", "OperationRequest", "PlannedSource",
    "Rejection", "RejectReason", "RetentionPair", "Shape", "SourceAction",
    "ValidationOutcome", "HostCapabilities",
    "LockRequest", "RetentionMode", "ValidityUnit",
    # Functions
    "classify", "validate", "check_operation",
    "check_lock_syntax", "parse_mode", "parse_validity",
]
