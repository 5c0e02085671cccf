"""Domain types for Triversi."""

from __future__ import annotations

from enum import Enum

# A lattice point (x, y): row y holds positions x = 0..y.
Coord = tuple[int, int]


class Player(str, Enum):
    P1 = "p1"
    P2 = "p2"
    P3 = "p3"

    def next(self) -> Player:
        """Return the player after this one in turn order."""
        return PLAYERS[(PLAYERS.index(self) + 1) % len(PLAYERS)]


PLAYERS: tuple[Player, ...] = (Player.P1, Player.P2, Player.P3)

CellState = Player | None


class Direction(Enum):
    """The six lattice steps (dx, dy) of the triangular grid."""

    EAST = (1, 0)
    WEST = (-1, 0)
    DOWN_LEFT = (0, 1)
    DOWN_RIGHT = (1, 1)
    UP_RIGHT = (0, -1)
    UP_LEFT = (-1, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


def player_order(start: Player) -> list[Player]:
    """All three players in turn order, beginning with *start*."""
    i = PLAYERS.index(start)
    return [PLAYERS[(i + k) % len(PLAYERS)] for k in range(len(PLAYERS))]


def coord_to_key(coord: Coord) -> str:
    x, y = coord
    return f"{x},{y}"


def key_to_coord(key: str) -> Coord:
    x, y = key.split(",")
    return int(x), int(y)
