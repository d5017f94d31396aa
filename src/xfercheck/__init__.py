from ._paths import contains
from .exceptions import ValidationError
from .client import ClientURL, LocalStatClient, StatClient, parse_url, resolve_locations
from .shape import (
    HostCapabilities,
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
    check_operation,
    classify,
    validate,
)

__all__ = [
    "contains", "ValidationError",
    "ClientURL", "LocalStatClient", "StatClient", "parse_url", "resolve_locations",
    "HostCapabilities", "Location", "LocationKind", "OperationRequest",
    "PlannedSource", "Rejection", "RejectReason", "RetentionPair", "Shape",
    "SourceAction", "ValidationOutcome",
    "check_operation", "classify", "validate",
]
