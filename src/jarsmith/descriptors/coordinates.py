"""Dependency coordinates — ``group:artifact:version`` parsing and ordering."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SEPARATOR = ":"


@dataclass(frozen=True, order=True)
class Coordinate:
    """A fully specified Maven coordinate."""

    group: str
    artifact: str
    version: str

    def __str__(self) -> str:
        return SEPARATOR.join((self.group, self.artifact, self.version))


def parse_coordinate(text: str) -> Coordinate | None:
    """Parse ``group:artifact:version``; None for anything else.

    Partial coordinates (wrong segment count, empty segments) are tolerated
    by the caller skipping them rather than failing the run.
    """
    parts = [p.strip() for p in text.strip().split(SEPARATOR)]
    if len(parts) != 3 or not all(parts):
        return None
    return Coordinate(*parts)


def resolve_dependencies(dependencies: Mapping[str, str]) -> list[Coordinate]:
    """Resolve a dependency map to coordinates in a deterministic order.

    Sorted by (group, artifact, version), then by logical name, so the result
    never depends on the mapping's iteration order.
    """
    resolved: list[tuple[Coordinate, str]] = []
    for name, text in dependencies.items():
        coordinate = parse_coordinate(text)
        if coordinate is None:
            logger.debug("Skipping dependency %r: malformed coordinate %r", name, text)
            continue
        resolved.append((coordinate, name))
    return [coordinate for coordinate, _ in sorted(resolved)]
