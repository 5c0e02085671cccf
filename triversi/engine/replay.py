"""Replay-from-start helpers.

Rebuilds sessions and boards from a move list without touching the live
session, e.g. for browsing history or checking a recorded game.
"""

from __future__ import annotations

from collections.abc import Iterable

from triversi.engine.errors import IllegalMoveError
from triversi.engine.models import HistoryEntry, PlayerMarks
from triversi.engine.session import GameSession
from triversi.game.board import Board
from triversi.game.types import Coord


def replay(
    edge_length: int,
    moves: Iterable[Coord | HistoryEntry],
    marks: PlayerMarks | None = None,
) -> GameSession:
    """Play *moves* from the initial position on a fresh session.

    Every move goes through :meth:`GameSession.place`, so an invalid sequence
    raises IllegalMoveError or GameOverError at the offending move. When a
    HistoryEntry is given, its recorded player and captures must match the
    position it is replayed on.
    """
    session = GameSession(edge_length=edge_length, marks=marks)
    for move in moves:
        if isinstance(move, HistoryEntry):
            if not session.is_finished:
                _check_recorded(session, move)
            session.place(move.coord)
        else:
            session.place(tuple(move))
    return session


def _check_recorded(session: GameSession, entry: HistoryEntry) -> None:
    if entry.player != session.current_player:
        raise IllegalMoveError(
            f"Recorded move by {entry.player.value} but "
            f"{session.current_player.value} is to move",
            entry.coord,
            entry.player,
        )
    expected = {(cell, session.board.get(cell)) for cell in session.captures_for(entry.coord)}
    if set(entry.flipped) != expected:
        raise IllegalMoveError(
            f"Recorded captures at {entry.coord} do not match the position",
            entry.coord,
            entry.player,
        )


def board_at(session: GameSession, turn: int) -> Board:
    """Board after the first *turn* moves of *session* (0 = initial position).

    The live session is not modified.
    """
    entries = session.history.entries()
    if not 0 <= turn <= len(entries):
        raise IndexError(f"Turn {turn} out of range 0..{len(entries)}")

    board = Board.initial(session.lattice)
    for entry in entries[:turn]:
        board.set(entry.coord, entry.player)
        for cell, _prior in entry.flipped:
            board.set(cell, entry.player)
    return board


def clone_session(session: GameSession) -> GameSession:
    """Independent copy of *session*, rebuilt by replaying its history.

    Undone moves waiting to be redone are not carried over.
    """
    clone = replay(session.edge_length, session.history, marks=session.marks)
    clone.distance = session.distance
    return clone
