"""Capture and legality rules for three-player Reversi.

A placement captures, in each direction, the contiguous run of stones that
are neither empty nor the placer's, provided the run is closed off by one of
the placer's own stones. The run may mix both opponents' stones; only
"empty / mine / not mine" is ever inspected.
"""

from __future__ import annotations

from triversi.game.board import Board
from triversi.game.types import Coord, Direction, Player


def find_run(board: Board, coord: Coord, player: Player, direction: Direction) -> list[Coord]:
    """Return the stones captured along one direction (empty list if none)."""
    run: list[Coord] = []
    for cell in board.lattice.ray(coord, direction):
        owner = board.get(cell)
        if owner is None:
            return []
        if owner == player:
            return run
        run.append(cell)
    # Fell off the edge without meeting a placer stone
    return []


def find_captures(board: Board, coord: Coord, player: Player) -> frozenset[Coord]:
    """Union of captured runs for placing *player* at *coord*.

    Occupied targets capture nothing. The board is not modified.
    """
    if not board.is_empty(coord):
        return frozenset()
    captured: set[Coord] = set()
    for direction in board.lattice.directions:
        captured.update(find_run(board, coord, player, direction))
    return frozenset(captured)


def is_legal(board: Board, coord: Coord, player: Player) -> bool:
    return bool(find_captures(board, coord, player))


def legal_moves(board: Board, player: Player) -> dict[Coord, frozenset[Coord]]:
    """Map every legal placement for *player* to its capture set, in lattice order."""
    moves: dict[Coord, frozenset[Coord]] = {}
    for coord in board.empty_coords():
        captures = find_captures(board, coord, player)
        if captures:
            moves[coord] = captures
    return moves


def has_legal_move(board: Board, player: Player) -> bool:
    return any(find_captures(board, coord, player) for coord in board.empty_coords())
