from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from triversi.game.types import Coord, Direction


@runtime_checkable
class BoardTopology(Protocol):
    """Interface the board and capture rules need from a coordinate system."""

    edge_length: int
    coords: tuple[Coord, ...]

    @property
    def size(self) -> int:
        ...

    @property
    def directions(self) -> tuple[Direction, ...]:
        ...

    def contains(self, coord: object) -> bool:
        ...

    def index(self, coord: Coord) -> int:
        ...

    def step(self, coord: Coord, direction: Direction) -> Coord | None:
        """Next coordinate in *direction*, or None past the board edge."""
        ...

    def ray(self, coord: Coord, direction: Direction) -> Iterator[Coord]:
        """Coordinates outward from *coord* until the edge, excluding *coord*."""
        ...

    def neighbors(self, coord: Coord) -> list[Coord]:
        ...
