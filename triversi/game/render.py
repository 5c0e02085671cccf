"""Plain-text drawing of a Triversi board.

Display only: ``distance`` spaces the lattice points on screen and has no
effect on adjacency or captures.
"""

from __future__ import annotations

from triversi.engine.errors import ConfigError
from triversi.engine.models import PlayerMarks
from triversi.game.board import Board
from triversi.game.types import Coord

MIN_DISTANCE = 2
MAX_DISTANCE = 10


def validate_distance(distance: int) -> None:
    if isinstance(distance, bool) or not isinstance(distance, int):
        raise ConfigError(f"Distance must be an integer, got {distance!r}", distance)
    if not MIN_DISTANCE <= distance <= MAX_DISTANCE:
        raise ConfigError(
            f"{distance} is an invalid distance (must be {MIN_DISTANCE}..{MAX_DISTANCE})",
            distance,
        )


def stone_position(coord: Coord, edge_length: int, distance: int) -> tuple[int, int]:
    """(column, row) of a lattice point in the text grid."""
    x, y = coord
    return distance * (edge_length - y - 1) + 2 * distance * x, distance * y


def render_board(
    board: Board,
    marks: PlayerMarks | None = None,
    distance: int = 3,
    frame: bool = False,
) -> str:
    """Draw *board* as text, one line per grid row, trailing blanks stripped.

    With ``frame`` on, bonds between neighbours are drawn (``-``, ``/``,
    ``\\``) and empty points are left blank; otherwise empty points show as
    ``.``.
    """
    validate_distance(distance)
    marks = marks or PlayerMarks()
    r = board.edge_length
    d = distance
    grid = [[" "] * (2 * d * (r - 1) + 1) for _ in range(d * (r - 1) + 1)]

    if frame:
        for x, y in board.lattice.coords:
            col, row = stone_position((x, y), r, d)
            if x < y:
                for k in range(1, 2 * d):
                    grid[row][col + k] = "-"
            if y < r - 1:
                for k in range(1, d):
                    grid[row + k][col - k] = "/"
                    grid[row + k][col + k] = "\\"

    for coord in board.lattice.coords:
        col, row = stone_position(coord, r, d)
        owner = board.get(coord)
        if owner is not None:
            grid[row][col] = marks.mark(owner)
        else:
            grid[row][col] = " " if frame else "."

    return "\n".join("".join(line).rstrip() for line in grid)
