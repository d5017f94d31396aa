"""Separator-aware path helpers used by the containment check."""

from __future__ import annotations


def ensure_trailing_separator(path: str, separator: str = "/") -> str:
    """Return *path* ending with exactly one trailing *separator*."""
    if not separator:
        raise ValueError("Separator must not be empty")
    return path.rstrip(separator) + separator


def contains(ancestor: str, descendant: str, separator: str = "/") -> bool:
    """Return True if *descendant* is *ancestor* or lies beneath it.

    Both paths are compared with a trailing separator so that ``/a/b``
    contains ``/a/b/c`` but ``/a/bc`` does not contain ``/a/b`` (and vice
    versa).  Identical paths count as contained.
    """
    return ensure_trailing_separator(descendant, separator).startswith(
        ensure_trailing_separator(ancestor, separator)
    )
