"""Board state management for Triversi.

The board is a passive container: a dense list of cell states indexed by the
lattice's coordinate order. Reversi legality is enforced elsewhere
(:mod:`triversi.game.capture`).
"""

from __future__ import annotations

from triversi.engine.protocol import BoardTopology
from triversi.game.lattice import get_lattice, validate_edge_length
from triversi.game.types import PLAYERS, CellState, Coord, Player


def seed_layout(edge_length: int) -> dict[Coord, Player]:
    """Starting stones for *edge_length*: four per player around the centroid."""
    validate_edge_length(edge_length)
    r = edge_length
    if r % 3 == 0:
        a, b = r // 3, 2 * r // 3
        return {
            (a, b): Player.P1,
            (a + 1, b - 1): Player.P1,
            (a - 1, b - 2): Player.P1,
            (a - 2, b - 1): Player.P1,
            (a, b - 1): Player.P2,
            (a - 2, b - 2): Player.P2,
            (a - 1, b): Player.P2,
            (a + 1, b + 1): Player.P2,
            (a - 1, b - 1): Player.P3,
            (a, b + 1): Player.P3,
            (a + 1, b): Player.P3,
            (a, b - 2): Player.P3,
        }
    # r % 3 == 2
    return {
        ((r - 2) // 3, (2 * r - 4) // 3): Player.P1,
        ((r - 5) // 3, (2 * r - 1) // 3): Player.P1,
        ((r + 1) // 3, (2 * r + 2) // 3): Player.P1,
        ((r + 4) // 3, (2 * r - 1) // 3): Player.P1,
        ((r - 2) // 3, (2 * r - 1) // 3): Player.P2,
        ((r + 4) // 3, (2 * r + 2) // 3): Player.P2,
        ((r + 1) // 3, (2 * r - 4) // 3): Player.P2,
        ((r - 5) // 3, (2 * r - 7) // 3): Player.P2,
        ((r + 1) // 3, (2 * r - 1) // 3): Player.P3,
        ((r - 2) // 3, (2 * r - 7) // 3): Player.P3,
        ((r - 5) // 3, (2 * r - 4) // 3): Player.P3,
        ((r - 2) // 3, (2 * r + 2) // 3): Player.P3,
    }


class Board:
    """Mapping from every lattice coordinate to a cell state."""

    def __init__(self, lattice: BoardTopology) -> None:
        self.lattice = lattice
        self._cells: list[CellState] = [None] * lattice.size

    @classmethod
    def initial(cls, lattice: BoardTopology) -> Board:
        """A board holding the seed stones for the lattice's edge length."""
        board = cls(lattice)
        board.seed()
        return board

    @classmethod
    def for_edge_length(cls, edge_length: int) -> Board:
        return cls.initial(get_lattice(edge_length))

    @property
    def edge_length(self) -> int:
        return self.lattice.edge_length

    def seed(self) -> None:
        """Clear every cell and place the seed stones."""
        self._cells = [None] * self.lattice.size
        for coord, player in seed_layout(self.edge_length).items():
            self.set(coord, player)

    def get(self, coord: Coord) -> CellState:
        return self._cells[self.lattice.index(coord)]

    def set(self, coord: Coord, state: CellState) -> None:
        self._cells[self.lattice.index(coord)] = state

    def is_empty(self, coord: Coord) -> bool:
        return self.get(coord) is None

    def snapshot(self) -> dict[Coord, CellState]:
        """Full copy of the board contents, keyed by coordinate."""
        return dict(zip(self.lattice.coords, self._cells))

    def restore(self, snapshot: dict[Coord, CellState]) -> None:
        cells: list[CellState] = [None] * self.lattice.size
        for coord, state in snapshot.items():
            cells[self.lattice.index(coord)] = state
        self._cells = cells

    def copy(self) -> Board:
        clone = Board(self.lattice)
        clone._cells = list(self._cells)
        return clone

    def counts(self) -> dict[Player, int]:
        counts = {p: 0 for p in PLAYERS}
        for state in self._cells:
            if state is not None:
                counts[state] += 1
        return counts

    def occupied(self) -> int:
        return sum(1 for state in self._cells if state is not None)

    def empty_coords(self) -> list[Coord]:
        return [c for c, state in zip(self.lattice.coords, self._cells) if state is None]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.edge_length == other.edge_length and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board(edge_length={self.edge_length}, occupied={self.occupied()})"
