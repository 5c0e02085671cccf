from __future__ import annotations

import pytest

from triversi.engine.session import GameSession
from triversi.game.board import Board
from triversi.game.lattice import get_lattice
from triversi.game.types import Coord, Player


def make_board(edge_length: int, cells: dict[Coord, Player]) -> Board:
    """An otherwise empty board holding exactly *cells*."""
    board = Board(get_lattice(edge_length))
    for coord, player in cells.items():
        board.set(coord, player)
    return board


@pytest.fixture
def session5() -> GameSession:
    """Fresh game on the smallest board (three empty corners)."""
    return GameSession(edge_length=5)


@pytest.fixture
def session6() -> GameSession:
    return GameSession(edge_length=6)


@pytest.fixture
def empty_board6() -> Board:
    return Board(get_lattice(6))
