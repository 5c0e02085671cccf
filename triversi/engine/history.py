"""Move history with undo and redo.

Entries hold only the diff of a move (placed cell plus each flipped cell's
prior owner), so undoing never needs a board snapshot.
"""

from __future__ import annotations

from collections.abc import Iterator

from triversi.engine.models import HistoryEntry


class HistoryLog:
    """Ordered record of applied moves plus a stack of undone ones."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []
        self._undone: list[HistoryEntry] = []

    def record(self, entry: HistoryEntry) -> None:
        """Append a newly played move. Discards anything that could be redone."""
        self._entries.append(entry)
        self._undone.clear()

    def undo(self) -> HistoryEntry | None:
        if not self._entries:
            return None
        entry = self._entries.pop()
        self._undone.append(entry)
        return entry

    def redo(self) -> HistoryEntry | None:
        if not self._undone:
            return None
        entry = self._undone.pop()
        self._entries.append(entry)
        return entry

    def clear(self) -> None:
        self._entries.clear()
        self._undone.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._entries)

    @property
    def can_redo(self) -> bool:
        return bool(self._undone)

    @property
    def last(self) -> HistoryEntry | None:
        return self._entries[-1] if self._entries else None

    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
