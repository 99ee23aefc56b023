"""
Test helpers - Small boards and a scripted RNG.
"""

from ..engine_core.board import AreaData, Edge, GameData


class ScriptedRNG:
    """RNG test double that returns pre-set values in order."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def next_int(self, min_inclusive, max_exclusive):
        if not self.values:
            raise AssertionError("ScriptedRNG ran out of values")
        value = self.values.pop(0)
        assert min_inclusive <= value < max_exclusive, (
            f"scripted value {value} outside [{min_inclusive}, {max_exclusive})"
        )
        self.calls.append((min_inclusive, max_exclusive))
        return value


def corridor_board(tiles=("ST", "NEU", "NEU", "NEU", "NEU", "TAX"), area_id="A"):
    """One row of cells joined left to right, no branches; the last cell is a dead end."""
    edges = tuple(Edge((0, i), (0, i + 1)) for i in range(len(tiles) - 1))
    area = AreaData(area_id=area_id, name="Corridor", grid=(tuple(tiles),), edges=edges)
    return GameData(areas={area_id: area})


def branch_board():
    """
    Corridor of four cells, then a fork.

        (0,0) -> (0,1) -> (0,2) -> (0,3) -> (0,4) -> (0,5) -> (0,6)
                                    |
                                    v
                                  (1,3) -> (1,4) -> (1,5) -> (1,6)

    (0,3) is reached after 3 steps and has two outgoing edges.
    """
    grid = (
        ("ST", "NEU", "NEU", "MKT", "NEU", "MINT", "NEU"),
        (None, None, None, "NEU", "NEU", "TAX", "NEU"),
    )
    edges = [Edge((0, i), (0, i + 1)) for i in range(6)]
    edges.append(Edge((0, 3), (1, 3)))
    edges.extend(Edge((1, i), (1, i + 1)) for i in range(3, 6))
    area = AreaData(area_id="A", name="Fork", grid=grid, edges=tuple(edges))
    return GameData(areas={"A": area})


def ring_board(length=8, tiles=None):
    """Closed loop of cells; movement never blocks."""
    tiles = tiles or tuple("NEU" for _ in range(length))
    edges = tuple(Edge((0, i), (0, (i + 1) % length)) for i in range(length))
    area = AreaData(area_id="R", name="Ring", grid=(tuple(tiles),), edges=edges)
    return GameData(areas={"R": area})
