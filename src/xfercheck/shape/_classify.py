"""Guess the shape of a copy/move request from its stat results."""

from __future__ import annotations

from typing import Sequence

from ._types import Location, LocationKind, Shape


def classify(sources: Sequence[Location], target: Location) -> Shape:
    """Return the :class:`Shape` for *sources* copied/moved to *target*.

    Pure function of the source count, the source kinds, and the target
    kind.  Never rejects; legality is decided by :func:`validate`.

    A single file goes to ``FILE_TO_FOLDER`` only when *target* is an
    existing directory.  A missing target means ``FILE_TO_FILE``.  A single
    missing source is treated as a tree that may not exist yet.
    """
    if not sources:
        raise ValueError("At least one source is required")
    if len(sources) > 1:
        return Shape.MANY_TO_FOLDER
    if sources[0].kind == LocationKind.FILE:
        if target.is_dir:
            return Shape.FILE_TO_FOLDER
        return Shape.FILE_TO_FILE
    return Shape.TREE_TO_FOLDER
