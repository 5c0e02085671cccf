"""Scoring for Triversi: occupied cell counts, ties kept."""

from __future__ import annotations

from triversi.engine.models import FinishReason, GameResult
from triversi.game.board import Board
from triversi.game.types import PLAYERS, Player


def count_cells(board: Board) -> dict[Player, int]:
    """Occupied cells per player (all three players always present)."""
    return board.counts()


def determine_winners(counts: dict[Player, int]) -> list[Player]:
    """Every player sharing the top count, in turn order."""
    top = max(counts.get(p, 0) for p in PLAYERS)
    return [p for p in PLAYERS if counts.get(p, 0) == top]


def build_result(board: Board, reason: FinishReason = FinishReason.NO_MOVES_AVAILABLE) -> GameResult:
    counts = count_cells(board)
    return GameResult(
        winners=determine_winners(counts),
        final_scores=counts,
        reason=reason,
    )
