from triversi.engine.errors import (
    ConfigError,
    GameEngineError,
    GameOverError,
    IllegalMoveError,
    OutOfBoundsError,
)
from triversi.engine.models import (
    FinishReason,
    GamePhase,
    GameResult,
    GameView,
    HistoryEntry,
    MoveResult,
    PlayerMarks,
)
from triversi.engine.session import GameSession
from triversi.game.board import Board
from triversi.game.lattice import Lattice, get_lattice
from triversi.game.types import PLAYERS, Direction, Player

__all__ = [
    "Board",
    "ConfigError",
    "Direction",
    "FinishReason",
    "GameEngineError",
    "GameOverError",
    "GamePhase",
    "GameResult",
    "GameSession",
    "GameView",
    "HistoryEntry",
    "IllegalMoveError",
    "Lattice",
    "MoveResult",
    "OutOfBoundsError",
    "PLAYERS",
    "Player",
    "PlayerMarks",
    "get_lattice",
]
