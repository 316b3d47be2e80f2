"""AI Slobsterble -- move engine and polling bot for Slobsterble games."""

from aislobsterble.constants import ALPHABET, BINGO_BONUS, BINGO_TILE_COUNT, MAX_PLAY_ATTEMPTS
from aislobsterble.tile import Axis, Modifier, PlacedTile, Tile
from aislobsterble.dictionary import Dictionary
from aislobsterble.board import BoardState
from aislobsterble.rack import Rack
from aislobsterble.combinatorics import combinations, next_combination, next_permutation, permutations
from aislobsterble.move import Candidate
from aislobsterble.engine import MoveEngine
from aislobsterble.selector import PlaySelector, ScoreCheck

__all__ = [
    "ALPHABET",
    "BINGO_BONUS",
    "BINGO_TILE_COUNT",
    "MAX_PLAY_ATTEMPTS",
    "Axis",
    "BoardState",
    "Candidate",
    "Dictionary",
    "Modifier",
    "MoveEngine",
    "PlacedTile",
    "PlaySelector",
    "Rack",
    "ScoreCheck",
    "Tile",
    "combinations",
    "next_combination",
    "next_permutation",
    "permutations",
]
