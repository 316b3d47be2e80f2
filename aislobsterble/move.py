"""Candidate play representation."""

from __future__ import annotations

from typing import Any

from aislobsterble.constants import BINGO_TILE_COUNT
from aislobsterble.tile import Axis, PlacedTile


class Candidate:
    """A dictionary-valid placement together with its score."""

    __slots__ = ("placement", "score", "words", "axis")

    def __init__(
        self,
        placement: tuple[PlacedTile, ...],
        score: int,
        words: list[str] | None = None,
        axis: Axis | None = None,
    ):
        if not placement:
            raise ValueError("A candidate needs at least one placed tile")
        self.placement = placement
        self.score = score
        self.words = words or []
        self.axis = axis

    @property
    def word(self) -> str:
        """The primary word, or '' when words were not recorded."""
        return self.words[0] if self.words else ""

    @property
    def cross_words(self) -> list[str]:
        return self.words[1:]

    @property
    def is_bingo(self) -> bool:
        return len(self.placement) == BINGO_TILE_COUNT

    def to_payload(self) -> list[dict[str, Any]]:
        """Tile entries for the play submission, in placement order."""
        return [
            {
                "row": pt.row,
                "column": pt.col,
                "letter": pt.tile.letter,
                "is_blank": pt.tile.is_blank,
                "value": pt.tile.value,
                "is_exchange": False,
            }
            for pt in self.placement
        ]

    def __repr__(self) -> str:
        bingo = " +BINGO!" if self.is_bingo else ""
        first = self.placement[0]
        arrow = self.axis.arrow if self.axis else ""
        return f"{self.word or '?'} at ({first.row},{first.col}) {arrow} = {self.score} pts{bingo}"
