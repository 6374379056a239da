"""OpenStreetMap elements and tile geometry."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from roadkit.polyline import Polyline

__all__ = ["OSMElement", "OSMNode", "OSMWay", "OSMRelation", "tile_bounds"]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class OSMElement:
    """Common part of OSM nodes, ways and relations: id and tags."""

    id: int = 0
    tags: dict[str, str] = field(default_factory=dict)

    def get_int(self, key: str) -> int:
        """Leading integer of a tag's value; 0 if absent or not numeric."""
        value = self.tags.get(key)
        if value is None:
            return 0
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0


@dataclass
class OSMNode(OSMElement):
    lonlat: tuple[float, float] = (0.0, 0.0)
    pos: tuple[float, float, float] = (0.0, 0.0, 0.0)
    ways: list[int] = field(default_factory=list)


@dataclass
class OSMWay(OSMElement):
    nodes: list[int] = field(default_factory=list)
    curve: Polyline = field(default_factory=Polyline)
    road: Any = None


@dataclass
class OSMRelation(OSMElement):
    """Relation members by id, each with its role."""

    nodes: dict[int, str] = field(default_factory=dict)
    ways: dict[int, str] = field(default_factory=dict)
    relations: dict[int, str] = field(default_factory=dict)


def tile_bounds(
    tile: tuple[int, int], tile_size: float = 51200.0
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Min and max corners of a square tile centred on ``tile * tile_size``."""
    half = tile_size / 2
    cx = tile[0] * tile_size
    cy = tile[1] * tile_size
    return ((cx - half, cy - half), (cx + half, cy + half))