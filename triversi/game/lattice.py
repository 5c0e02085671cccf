"""Triangular lattice geometry for Triversi.

The board is a triangle of lattice points. Row ``y`` (0 at the apex) holds
``y + 1`` points ``x = 0..y``, so every edge of the triangle carries
``edge_length`` points. Each interior point touches six neighbours, one per
:class:`Direction`.

Only edge lengths >= 5 that are congruent to 0 or 2 modulo 3 are accepted:
those are the sizes for which the starting cluster sits symmetrically about
the centroid.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache

from triversi.engine.errors import ConfigError, OutOfBoundsError
from triversi.game.types import DIRECTIONS, Coord, Direction

MIN_EDGE_LENGTH = 5


def validate_edge_length(edge_length: int) -> None:
    """Raise ConfigError unless *edge_length* can be tiled."""
    if isinstance(edge_length, bool) or not isinstance(edge_length, int):
        raise ConfigError(f"Edge length must be an integer, got {edge_length!r}", edge_length)
    if edge_length < MIN_EDGE_LENGTH:
        raise ConfigError(
            f"{edge_length} is an invalid edge length (must be >= {MIN_EDGE_LENGTH})",
            edge_length,
        )
    if edge_length % 3 not in (0, 2):
        raise ConfigError(
            f"{edge_length} is an invalid edge length (must be 0 or 2 modulo 3)",
            edge_length,
        )


def cell_count(edge_length: int) -> int:
    """Closed-form number of points on a board of *edge_length*."""
    return edge_length * (edge_length + 1) // 2


class Lattice:
    """Immutable coordinate system for one edge length."""

    def __init__(self, edge_length: int) -> None:
        validate_edge_length(edge_length)
        self.edge_length = edge_length
        self.coords: tuple[Coord, ...] = tuple(
            (x, y) for y in range(edge_length) for x in range(y + 1)
        )
        self._index: dict[Coord, int] = {c: i for i, c in enumerate(self.coords)}

    def __repr__(self) -> str:
        return f"Lattice(edge_length={self.edge_length})"

    @property
    def size(self) -> int:
        return len(self.coords)

    @property
    def directions(self) -> tuple[Direction, ...]:
        return DIRECTIONS

    def contains(self, coord: object) -> bool:
        try:
            return coord in self._index
        except TypeError:
            return False

    def __contains__(self, coord: object) -> bool:
        return self.contains(coord)

    def index(self, coord: Coord) -> int:
        try:
            return self._index[coord]
        except (KeyError, TypeError):
            raise OutOfBoundsError(coord, self.edge_length) from None

    def coord_at(self, index: int) -> Coord:
        if not 0 <= index < len(self.coords):
            raise OutOfBoundsError(index, self.edge_length)
        return self.coords[index]

    def step(self, coord: Coord, direction: Direction) -> Coord | None:
        """Coordinate one step from *coord* in *direction*, or None past the edge."""
        x, y = coord
        nxt = (x + direction.dx, y + direction.dy)
        return nxt if nxt in self._index else None

    def ray(self, coord: Coord, direction: Direction) -> Iterator[Coord]:
        """Yield coordinates stepping outward from *coord* until the edge.

        The starting coordinate itself is not yielded. Every call returns a
        fresh iterator.
        """
        self.index(coord)
        current = self.step(coord, direction)
        while current is not None:
            yield current
            current = self.step(current, direction)

    def neighbors(self, coord: Coord) -> list[Coord]:
        self.index(coord)
        return [n for d in DIRECTIONS if (n := self.step(coord, d)) is not None]


@lru_cache(maxsize=None)
def get_lattice(edge_length: int) -> Lattice:
    """Shared lattice for *edge_length*; built once per process."""
    return Lattice(edge_length)
