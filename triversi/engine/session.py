from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from triversi.config import Settings

from triversi.engine.errors import GameOverError, IllegalMoveError
from triversi.engine.history import HistoryLog
from triversi.engine.models import (
    FinishReason,
    GamePhase,
    GameResult,
    GameView,
    HistoryEntry,
    MoveResult,
    PlayerMarks,
)
from triversi.game.board import Board
from triversi.game.capture import legal_moves
from triversi.game.lattice import get_lattice
from triversi.game.render import render_board, validate_distance
from triversi.game.scoring import build_result
from triversi.game.types import Coord, Player, coord_to_key, player_order

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns one game of Triversi.

    Responsibilities:
    - Hold the board, turn state and move history
    - Validate placements against the current player's legal moves
    - Skip players who cannot move, and finish when nobody can
    - Undo, redo and reset
    - Expose a read-only view for renderers
    """

    def __init__(
        self,
        edge_length: int = 14,
        marks: PlayerMarks | None = None,
        distance: int = 3,
    ) -> None:
        self.lattice = get_lattice(edge_length)
        validate_distance(distance)
        self.marks = marks or PlayerMarks()
        self.distance = distance
        self.board = Board.initial(self.lattice)
        self.history = HistoryLog()
        self.current_player = Player.P1
        self.phase = GamePhase.IN_PROGRESS
        self.result: GameResult | None = None
        self._legal: dict[Coord, frozenset[Coord]] = {}
        self._start()

    @classmethod
    def from_settings(cls, settings: Settings) -> GameSession:
        return cls(
            edge_length=settings.edge_length,
            marks=PlayerMarks.parse(settings.player_marks),
            distance=settings.distance,
        )

    @property
    def edge_length(self) -> int:
        return self.lattice.edge_length

    @property
    def is_finished(self) -> bool:
        return self.phase == GamePhase.FINISHED

    @property
    def legal_moves(self) -> frozenset[Coord]:
        return frozenset(self._legal)

    def captures_for(self, coord: Coord) -> frozenset[Coord]:
        """Cells the current player would flip at *coord* (empty if illegal)."""
        return self._legal.get(coord, frozenset())

    def counts(self) -> dict[Player, int]:
        return self.board.counts()

    # ------------------------------------------------------------------ #
    #  Intents
    # ------------------------------------------------------------------ #

    def place(self, coord: Coord) -> MoveResult:
        """
        Place the current player's stone at *coord*.

        Raises GameOverError once the game has finished and IllegalMoveError
        for any coordinate outside the legal-move set. State is untouched on
        either error.
        """
        if self.is_finished:
            raise GameOverError("Game is finished")

        player = self.current_player
        try:
            captures = self._legal.get(coord)
        except TypeError:
            captures = None
        if not captures:
            raise IllegalMoveError(
                f"Player {player.value} cannot place at {coord!r}", coord, player
            )

        entry = HistoryEntry(
            player=player,
            coord=coord,
            flipped=tuple(
                (cell, self.board.get(cell)) for cell in self.lattice.coords if cell in captures
            ),
        )
        self._apply(entry)
        self.history.record(entry)
        logger.debug(f"{player.value} placed at {coord}, captured {len(captures)}")

        skipped = self._advance(player.next())
        return MoveResult(
            entry=entry,
            next_player=None if self.is_finished else self.current_player,
            skipped=skipped,
            game_over=self._result_copy(),
        )

    def undo(self) -> HistoryEntry | None:
        """Take back the last move. Returns None (and changes nothing) if there is none."""
        entry = self.history.undo()
        if entry is None:
            return None
        self._revert(entry)
        self._set_turn(entry.player)
        logger.debug(f"Undid {entry.player.value} at {entry.coord}")
        return entry

    def redo(self) -> HistoryEntry | None:
        """Replay the most recently undone move, if any."""
        entry = self.history.redo()
        if entry is None:
            return None
        self._apply(entry)
        self._advance(entry.player.next())
        logger.debug(f"Redid {entry.player.value} at {entry.coord}")
        return entry

    def reset(self) -> None:
        """Discard history and start over from the seeded board."""
        logger.info(f"Resetting game after {len(self.history)} moves")
        self.history.clear()
        self.board.seed()
        self._start()

    # ------------------------------------------------------------------ #
    #  View
    # ------------------------------------------------------------------ #

    def view(self) -> GameView:
        return GameView(
            edge_length=self.edge_length,
            cells={coord_to_key(c): state for c, state in self.board.snapshot().items()},
            current_player=self.current_player,
            legal_moves=[coord_to_key(c) for c in self._legal],
            phase=self.phase,
            counts=self.board.counts(),
            result=self._result_copy(),
            history=list(self.history),
            marks=self.marks,
        )

    def render(self, frame: bool = False) -> str:
        return render_board(self.board, self.marks, self.distance, frame)

    # ------------------------------------------------------------------ #
    #  Turn control
    # ------------------------------------------------------------------ #

    def _start(self) -> None:
        self._advance(Player.P1)
        if not self.is_finished:
            logger.info(
                f"Started game on edge length {self.edge_length}, "
                f"{self.current_player.value} to move"
            )

    def _advance(self, start: Player) -> list[Player]:
        """Hand the turn to the first player from *start* who can move.

        Returns the players skipped on the way. Finishes the game when none
        of the three can move.
        """
        skipped: list[Player] = []
        for player in player_order(start):
            moves = legal_moves(self.board, player)
            if moves:
                self.current_player = player
                self.phase = GamePhase.IN_PROGRESS
                self.result = None
                self._legal = moves
                for p in skipped:
                    logger.info(f"{p.value} has no legal move, turn skipped")
                return skipped
            skipped.append(player)

        self.current_player = start
        self.phase = GamePhase.FINISHED
        self._legal = {}
        self.result = build_result(self.board, FinishReason.NO_MOVES_AVAILABLE)
        scores = ", ".join(f"{p.value}={n}" for p, n in self.result.final_scores.items())
        logger.info(
            f"Game finished: winners={[p.value for p in self.result.winners]}, scores: {scores}"
        )
        return []

    def _result_copy(self) -> GameResult | None:
        return None if self.result is None else self.result.model_copy(deep=True)

    def _set_turn(self, player: Player) -> None:
        self.current_player = player
        self.phase = GamePhase.IN_PROGRESS
        self.result = None
        self._legal = legal_moves(self.board, player)

    def _apply(self, entry: HistoryEntry) -> None:
        self.board.set(entry.coord, entry.player)
        for cell, _prior in entry.flipped:
            self.board.set(cell, entry.player)

    def _revert(self, entry: HistoryEntry) -> None:
        for cell, prior in entry.flipped:
            self.board.set(cell, prior)
        self.board.set(entry.coord, None)

    def __repr__(self) -> str:
        return (
            f"GameSession(edge_length={self.edge_length}, phase={self.phase.value}, "
            f"current_player={self.current_player.value}, moves={len(self.history)})"
        )

