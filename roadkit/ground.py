"""Ground patches filled between roads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["GroundPoint", "Ground"]

_EXPIRED = "Expired"


@dataclass(frozen=True)
class GroundPoint:
    """Corner of a ground patch: a slot end on one side of a road."""

    road: Any = None
    side: int = 0
    index: int = 0

    def segment_start(self) -> bool:
        return bool((self.index % 2) ^ (not self.side))

    def segment_end(self) -> bool:
        return bool((self.index % 2) ^ bool(self.side))


@dataclass
class Ground:
    """Polygon of ground bounded by road sides and manual points."""

    material: Optional[str] = None
    manual_points: list[tuple[float, float, float]] = field(default_factory=list)
    points: list[GroundPoint] = field(default_factory=list)
    closed_loop: bool = False
    tags: set[str] = field(default_factory=set)

    def is_end_point(self, index: int) -> bool:
        return index == 0 or index == len(self.points) - 1

    def is_expired(self) -> bool:
        return _EXPIRED in self.tags

    def mark_expired(self) -> None:
        self.tags.add(_EXPIRED)

    def renew(self) -> None:
        self.tags.discard(_EXPIRED)