"""Tests for three-player capture rules."""

from __future__ import annotations

import pytest

from tests.conftest import make_board
from triversi.game.board import Board
from triversi.game.capture import (
    find_captures,
    find_run,
    has_legal_move,
    is_legal,
    legal_moves,
)
from triversi.game.types import Direction, Player

P1, P2, P3 = Player.P1, Player.P2, Player.P3


def _swap_opponents(board: Board, placer: Player) -> Board:
    """Relabel the two non-placing players' stones."""
    a, b = [p for p in (P1, P2, P3) if p != placer]
    swapped = board.copy()
    for coord, owner in board.snapshot().items():
        if owner == a:
            swapped.set(coord, b)
        elif owner == b:
            swapped.set(coord, a)
    return swapped


class TestSingleDirection:
    def test_single_stone_bracketed(self) -> None:
        board = make_board(6, {(1, 5): P2, (2, 5): P1})
        assert find_run(board, (0, 5), P1, Direction.EAST) == [(1, 5)]
        assert find_captures(board, (0, 5), P1) == {(1, 5)}

    def test_long_run(self) -> None:
        board = make_board(6, {(1, 5): P2, (2, 5): P2, (3, 5): P2, (4, 5): P1})
        assert find_captures(board, (0, 5), P1) == {(1, 5), (2, 5), (3, 5)}

    def test_mixed_opponent_run_flips_whole(self) -> None:
        board = make_board(6, {(1, 5): P2, (2, 5): P3, (3, 5): P2, (4, 5): P1})
        assert find_captures(board, (0, 5), P1) == {(1, 5), (2, 5), (3, 5)}

    def test_empty_in_run_voids_direction(self) -> None:
        board = make_board(6, {(1, 5): P2, (3, 5): P2, (4, 5): P1})
        assert find_captures(board, (0, 5), P1) == frozenset()

    def test_run_reaching_edge_captures_nothing(self) -> None:
        board = make_board(6, {(1, 5): P2, (2, 5): P3, (3, 5): P2})
        assert find_captures(board, (0, 5), P1) == frozenset()

    def test_adjacent_own_stone_captures_nothing(self) -> None:
        board = make_board(6, {(1, 5): P1, (2, 5): P2, (3, 5): P1})
        assert find_captures(board, (0, 5), P1) == frozenset()

    def test_only_first_placer_stone_bounds_run(self) -> None:
        board = make_board(6, {(1, 5): P2, (2, 5): P1, (3, 5): P3, (4, 5): P1})
        assert find_captures(board, (0, 5), P1) == {(1, 5)}

    @pytest.mark.parametrize("direction", list(Direction))
    def test_every_direction_captures(self, direction: Direction) -> None:
        centre = (2, 4)
        board = make_board(9, {})
        run = list(board.lattice.ray(centre, direction))[:2]
        assert len(run) == 2
        board.set(run[0], P3)
        board.set(run[1], P2)
        assert find_captures(board, centre, P2) == {run[0]}


class TestUnion:
    def test_captures_in_several_directions(self) -> None:
        board = make_board(6, {
            (1, 3): P2, (2, 3): P1,      # east
            (0, 4): P3, (0, 5): P1,      # down-left
            (1, 4): P2, (2, 5): P1,      # down-right
            (0, 2): P3,                  # up-right, open ended
        })
        assert find_captures(board, (0, 3), P1) == {(1, 3), (0, 4), (1, 4)}

    def test_occupied_target_captures_nothing(self) -> None:
        board = make_board(6, {(0, 5): P3, (1, 5): P2, (2, 5): P1})
        assert find_captures(board, (0, 5), P1) == frozenset()
        assert not is_legal(board, (0, 5), P1)

    def test_does_not_mutate_board(self) -> None:
        board = make_board(6, {(1, 5): P2, (2, 5): P1})
        before = board.snapshot()
        find_captures(board, (0, 5), P1)
        legal_moves(board, P1)
        assert board.snapshot() == before


class TestOpponentSymmetry:
    @pytest.mark.parametrize("placer", [P1, P2, P3])
    def test_swapping_opponents_keeps_captures(self, placer: Player) -> None:
        board = Board.for_edge_length(8)
        board.set((0, 7), P2)
        board.set((5, 6), P3)
        swapped = _swap_opponents(board, placer)
        for coord in board.lattice.coords:
            assert find_captures(board, coord, placer) == find_captures(swapped, coord, placer)


class TestLegalMoves:
    def test_opening_moves_edge_length_five(self) -> None:
        board = Board.for_edge_length(5)
        moves = legal_moves(board, P1)
        assert list(moves) == [(0, 0), (0, 4), (4, 4)]
        assert moves[(0, 0)] == {(0, 1), (0, 2), (1, 1), (2, 2)}
        assert moves[(0, 4)] == {(1, 4)}
        assert moves[(4, 4)] == {(3, 4)}

    def test_opening_moves_bracket_opponents(self) -> None:
        board = Board.for_edge_length(9)
        for player in (P1, P2, P3):
            moves = legal_moves(board, player)
            assert moves
            for coord, captured in moves.items():
                assert board.is_empty(coord)
                assert all(board.get(c) not in (None, player) for c in captured)
                assert any(n in captured for n in board.lattice.neighbors(coord))

    def test_no_moves_on_empty_board(self, empty_board6: Board) -> None:
        assert legal_moves(empty_board6, P1) == {}
        assert not has_legal_move(empty_board6, P1)

    def test_no_moves_on_full_board(self) -> None:
        board = Board.for_edge_length(5)
        for coord in board.empty_coords():
            board.set(coord, P3)
        for player in (P1, P2, P3):
            assert not has_legal_move(board, player)

    def test_has_legal_move_agrees(self) -> None:
        board = Board.for_edge_length(6)
        for player in (P1, P2, P3):
            assert has_legal_move(board, player) == bool(legal_moves(board, player))
