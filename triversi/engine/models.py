from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from triversi.engine.errors import ConfigError
from triversi.game.types import PLAYERS, Coord, Player

# --- Phase ---
class GamePhase(str, Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"

class FinishReason(str, Enum):
    NO_MOVES_AVAILABLE = "no_moves_available"

# --- Player marks (display only) ---
class PlayerMarks(BaseModel):
    model_config = ConfigDict(frozen=True)

    p1: str = "1"
    p2: str = "2"
    p3: str = "3"

    @classmethod
    def parse(cls, text: str) -> PlayerMarks:
        """Parse ``"a,b,c"`` into marks: three printable ASCII characters."""
        parts = [part.strip() for part in text.split(",")]
        if len(parts) != len(PLAYERS):
            raise ConfigError(f"Expected {len(PLAYERS)} player marks, got {text!r}", text)
        for part in parts:
            if len(part) != 1 or not part.isascii() or not part.isprintable():
                raise ConfigError(f"Player mark {part!r} must be one printable ASCII character", text)
        if len(set(parts)) != len(parts):
            raise ConfigError(f"Player marks must be distinct, got {text!r}", text)
        return cls(p1=parts[0], p2=parts[1], p3=parts[2])

    def mark(self, player: Player) -> str:
        return getattr(self, player.value)

# --- History ---
class HistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    player: Player
    coord: Coord
    flipped: tuple[tuple[Coord, Player], ...] = ()  # (cell, prior owner)

    @property
    def captured(self) -> list[Coord]:
        return [cell for cell, _prior in self.flipped]

# --- Results ---
class GameResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    winners: list[Player]
    final_scores: dict[Player, int]
    reason: FinishReason = FinishReason.NO_MOVES_AVAILABLE

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

class MoveResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    entry: HistoryEntry
    next_player: Player | None = None
    skipped: list[Player] = Field(default_factory=list)
    game_over: GameResult | None = None

# --- View ---
class GameView(BaseModel):
    model_config = ConfigDict(frozen=True)

    edge_length: int
    cells: dict[str, Player | None]  # "x,y" -> owner
    current_player: Player
    legal_moves: list[str] = Field(default_factory=list)
    phase: GamePhase
    counts: dict[Player, int]
    result: GameResult | None = None
    history: list[HistoryEntry] = Field(default_factory=list)
    marks: PlayerMarks = Field(default_factory=PlayerMarks)
