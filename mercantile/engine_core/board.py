"""
Board Graph - Read-only queries over static board data.

A board is a set of areas. Each area has a grid of tile ids and a list of
directed edges between grid coordinates. The engine never mutates it.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .errors import ConfigurationError

Coord = tuple[int, int]


@dataclass(frozen=True)
class Edge:
    """A directed step from one cell to another within an area."""
    source: Coord
    target: Coord


@dataclass(frozen=True)
class AreaData:
    """One named section of the board."""
    area_id: str
    name: str
    grid: tuple[tuple[str | None, ...], ...]
    edges: tuple[Edge, ...] = ()

    def cell(self, coord: Coord) -> str | None:
        """Tile id at coord, or None if outside the grid or empty."""
        row, col = coord
        if row < 0 or row >= len(self.grid):
            return None
        cells = self.grid[row]
        if col < 0 or col >= len(cells):
            return None
        return cells[col] or None


@dataclass(frozen=True)
class GameData:
    """Static data for a whole board."""
    areas: dict[str, AreaData] = field(default_factory=dict)


def get_area(data: GameData, area_id: str) -> AreaData:
    """Look up an area, failing on unknown ids."""
    area = data.areas.get(area_id)
    if area is None:
        raise ConfigurationError(f"Unknown area: {area_id}")
    return area


def tile_at(data: GameData, area_id: str, coord: Coord) -> str:
    """Resolve the tile id at a coordinate."""
    tile_id = get_area(data, area_id).cell(coord)
    if tile_id is None:
        raise ConfigurationError(
            f"No tile at [{coord[0]},{coord[1]}] in area {area_id}"
        )
    return tile_id


def outgoing_edges(data: GameData, area_id: str, coord: Coord) -> list[Edge]:
    """
    Edges leaving coord, in board order, one per distinct target.

    A repeated edge is still a single successor, so it never forces a
    branch choice.
    """
    area = get_area(data, area_id)
    origin = tuple(coord)
    seen: set[Coord] = set()
    edges = []
    for edge in area.edges:
        if edge.source != origin or edge.target in seen:
            continue
        seen.add(edge.target)
        edges.append(edge)
    return edges
