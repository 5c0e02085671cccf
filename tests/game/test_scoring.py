"""Tests for Triversi scoring."""

from __future__ import annotations

from tests.conftest import make_board
from triversi.engine.models import FinishReason
from triversi.game.board import Board
from triversi.game.scoring import build_result, count_cells, determine_winners
from triversi.game.types import Player

P1, P2, P3 = Player.P1, Player.P2, Player.P3


class TestCountCells:
    def test_all_players_present(self, empty_board6: Board) -> None:
        assert count_cells(empty_board6) == {P1: 0, P2: 0, P3: 0}

    def test_counts(self) -> None:
        board = make_board(6, {(0, 0): P1, (0, 1): P1, (1, 1): P3})
        assert count_cells(board) == {P1: 2, P2: 0, P3: 1}


class TestWinners:
    def test_single_winner(self) -> None:
        assert determine_winners({P1: 3, P2: 7, P3: 5}) == [P2]

    def test_two_way_tie(self) -> None:
        assert determine_winners({P1: 6, P2: 2, P3: 6}) == [P1, P3]

    def test_three_way_tie(self) -> None:
        assert determine_winners({P1: 4, P2: 4, P3: 4}) == [P1, P2, P3]

    def test_missing_player_counts_as_zero(self) -> None:
        assert determine_winners({P2: 1}) == [P2]


class TestBuildResult:
    def test_result(self) -> None:
        board = make_board(6, {(0, 0): P3, (0, 1): P3, (1, 1): P1})
        result = build_result(board)
        assert result.winners == [P3]
        assert result.final_scores == {P1: 1, P2: 0, P3: 2}
        assert result.reason == FinishReason.NO_MOVES_AVAILABLE
        assert not result.is_tie

    def test_tie_result(self) -> None:
        result = build_result(Board.for_edge_length(5))
        assert result.is_tie
        assert result.winners == [P1, P2, P3]
