"""The acting player's tiles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING

from aislobsterble.errors import BlankCountMismatch
from aislobsterble.tile import Tile

if TYPE_CHECKING:
    from aislobsterble.models import GameState


class Rack:
    """Ordered multiset of tiles. Letterless tiles are unresolved blanks."""

    __slots__ = ("tiles",)

    def __init__(self, tiles: Iterable[Tile]):
        self.tiles: tuple[Tile, ...] = tuple(tiles)

    @classmethod
    def from_tile_counts(cls, groups: Iterable[tuple[Tile, int]]) -> Rack:
        """Expand run-length (tile, count) groups into a rack."""
        tiles: list[Tile] = []
        for tile, count in groups:
            tiles.extend([tile] * count)
        return cls(tiles)

    @classmethod
    def from_game_state(cls, state: GameState) -> Rack:
        return cls.from_tile_counts((tc.tile.to_tile(), tc.count) for tc in state.rack)

    @property
    def blank_count(self) -> int:
        """Number of tiles still waiting for a letter."""
        return sum(1 for t in self.tiles if t.letter is None)

    def fill_blanks(self, letters: Sequence[str]) -> Rack:
        """New rack where the i-th letterless tile (left to right) gets ``letters[i]``."""
        if len(letters) != self.blank_count:
            raise BlankCountMismatch(
                f"Got {len(letters)} letters for {self.blank_count} blank tiles"
            )
        fill = iter(letters)
        return Rack(t if t.letter is not None else t.with_letter(next(fill)) for t in self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __getitem__(self, index: int) -> Tile:
        return self.tiles[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rack):
            return NotImplemented
        return self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash(self.tiles)

    def __str__(self) -> str:
        return " ".join(str(t) for t in self.tiles)

    def __repr__(self) -> str:
        return f"Rack({self})"
