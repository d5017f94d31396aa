"""Resolve raw arguments into stat'ed :class:`~xfercheck.shape.Location` objects.

The storage backend is reached through the :class:`StatClient` protocol.
:class:`LocalStatClient` covers local paths; remote backends plug in by
implementing ``stat``.
"""

from __future__ import annotations

import os
import stat as _stat
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Protocol, Sequence

from .shape._types import Location, LocationKind


@dataclass(frozen=True)
class ClientURL:
    """A parsed argument: ``http(s)://host/path`` or a local path."""
    scheme: str
    host: str
    path: str
    separator: str


def parse_url(raw: str, default_separator: str = os.sep) -> ClientURL:
    """Split *raw* into scheme, host, and path.

    ``http://`` and ``https://`` URLs always use ``/``; anything else is a
    local path using *default_separator*.
    """
    for scheme in ("http", "https"):
        prefix = scheme + "://"
        if raw.lower().startswith(prefix):
            rest = raw[len(prefix):]
            host, sep, path = rest.partition("/")
            return ClientURL(scheme, host, sep + path, "/")
    return ClientURL("", "", raw, default_separator)


class StatClient(Protocol):
    """Anything that can report the existence and kind of a URL."""

    def stat(self, url: str) -> Location:
        """Return a :class:`Location` for *url*; failures give ``MISSING``."""


class LocalStatClient:
    """Stat local filesystem paths."""

    def __init__(self, *, follow_symlinks: bool = True) -> None:
        self.follow_symlinks = follow_symlinks

    def stat(self, url: str) -> Location:
        parsed = parse_url(url)
        if parsed.host:
            return Location(url, LocationKind.MISSING, parsed.separator,
                            host=parsed.host, path=parsed.path,
                            error="remote URLs are not supported by the local client")
        try:
            st = os.stat(url, follow_symlinks=self.follow_symlinks)
        except OSError as exc:
            return Location(url, LocationKind.MISSING, parsed.separator,
                            path=parsed.path, error=exc.strerror or str(exc))
        kind = LocationKind.DIRECTORY if _stat.S_ISDIR(st.st_mode) else LocationKind.FILE
        return Location(url, kind, parsed.separator, path=parsed.path)


def resolve_locations(
    client: StatClient,
    urls: Sequence[str],
    *,
    max_workers: int | None = None,
) -> list[Location]:
    """Stat every URL in *urls* concurrently.

    Results come back in argument order, whatever order the stat calls
    finish in.
    """
    if not urls:
        return []
    with ThreadPoolExecutor(max_workers=max_workers or min(len(urls), 8)) as executor:
        return list(executor.map(client.stat, urls))
