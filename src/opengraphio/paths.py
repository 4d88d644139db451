"""Dotted field-path lookups into decoded JSON responses."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional


class PathState(enum.Enum):
    FOUND = "found"
    # Parent exists but the final key is missing or null.
    UNDEFINED = "undefined"
    # An intermediate segment is missing or not a mapping.
    INVALID = "invalid"


@dataclass(frozen=True)
class PathLookup:
    path: str
    state: PathState
    value: Any = None
    failed_segment: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.state is PathState.FOUND


def lookup_path(data: Any, path: str) -> PathLookup:
    """Walk ``path`` (``"openGraph.title"``) through nested mappings."""
    segments = path.split(".")
    current = data
    for index, segment in enumerate(segments):
        is_last = index == len(segments) - 1
        if not isinstance(current, Mapping):
            return PathLookup(path, PathState.INVALID, failed_segment=segment)
        if segment not in current or current[segment] is None:
            state = PathState.UNDEFINED if is_last else PathState.INVALID
            return PathLookup(path, state, failed_segment=segment)
        current = current[segment]
    return PathLookup(path, PathState.FOUND, value=current)


def satisfies(data: Any, requires: Iterable[str]) -> bool:
    """True when every required path resolves to a defined value."""
    return all(lookup_path(data, path).found for path in requires)


__all__ = ["PathLookup", "PathState", "lookup_path", "satisfies"]
