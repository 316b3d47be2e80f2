"""Tiles, placed tiles, cell modifiers and placement axes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, slots=True)
class Tile:
    """A letter tile. ``letter`` is None for a blank that is not resolved yet.

    Ordering: letterless tiles first, then by letter, then regular tiles
    before blank-origin tiles, then by ascending value.
    """

    letter: str | None
    value: int
    is_blank: bool = False

    @property
    def is_resolved(self) -> bool:
        return self.letter is not None

    def with_letter(self, letter: str) -> Tile:
        """Same tile with ``letter`` assigned (value and blank flag are kept)."""
        return Tile(letter.upper(), self.value, self.is_blank)

    def _sort_key(self) -> tuple[bool, str, bool, int]:
        return (self.letter is not None, self.letter or "", self.is_blank, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        if self.letter is None:
            return "?"
        return self.letter.lower() if self.is_blank else self.letter


@total_ordering
@dataclass(frozen=True, slots=True)
class PlacedTile:
    """A tile bound to a board cell. Ordered by row, column, then tile."""

    row: int
    col: int
    tile: Tile

    @property
    def coord(self) -> tuple[int, int]:
        return (self.row, self.col)

    @property
    def letter(self) -> str | None:
        return self.tile.letter

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PlacedTile):
            return NotImplemented
        return (self.row, self.col, self.tile) < (other.row, other.col, other.tile)


@dataclass(frozen=True, slots=True)
class Modifier:
    """Per-cell multipliers. They only apply to newly placed tiles."""

    letter_multiplier: int = 1
    word_multiplier: int = 1

    @property
    def is_plain(self) -> bool:
        return self.letter_multiplier == 1 and self.word_multiplier == 1

    def label(self) -> str:
        """Short board label, e.g. ``2L`` or ``3W`` (``.`` for a plain cell)."""
        if self.word_multiplier > 1:
            return f"{self.word_multiplier}W"
        if self.letter_multiplier > 1:
            return f"{self.letter_multiplier}L"
        return "."


class Axis(Enum):
    """Placement direction; the value is the (row_delta, col_delta) step."""

    HORIZONTAL = (0, 1)
    VERTICAL = (1, 0)

    @property
    def row_delta(self) -> int:
        return self.value[0]

    @property
    def col_delta(self) -> int:
        return self.value[1]

    @property
    def complement(self) -> Axis:
        return Axis.VERTICAL if self is Axis.HORIZONTAL else Axis.HORIZONTAL

    @property
    def arrow(self) -> str:
        return "→" if self is Axis.HORIZONTAL else "↓"
