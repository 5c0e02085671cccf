from __future__ import annotations

from triversi.game.types import Coord, Player


class GameEngineError(Exception):
    """Base class for engine errors."""
    pass


class ConfigError(GameEngineError):
    """Board or display configuration is invalid; no game state was built."""

    def __init__(self, message: str, value: object = None):
        self.message = message
        self.value = value
        super().__init__(message)


class OutOfBoundsError(GameEngineError):
    """A coordinate outside the board's lattice was used."""

    def __init__(self, coord: object, edge_length: int):
        self.coord = coord
        self.edge_length = edge_length
        super().__init__(f"{coord!r} is not on a board of edge length {edge_length}")


class IllegalMoveError(GameEngineError):
    """Placement is not in the current legal-move set."""

    def __init__(self, message: str, coord: Coord | None = None, player: Player | None = None):
        self.message = message
        self.coord = coord
        self.player = player
        super().__init__(message)


class GameOverError(GameEngineError):
    """Move submitted to a finished game."""
    pass
