"""Move engine: exhaustive placement search with blank-letter resolution."""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Iterator, Sequence

from aislobsterble.board import BoardState
from aislobsterble.combinatorics import combinations, permutations
from aislobsterble.constants import ALPHABET, COMMON_BLANK_LETTERS, EXHAUSTIVE_BLANK_LIMIT
from aislobsterble.dictionary import Dictionary
from aislobsterble.errors import PlacementError
from aislobsterble.move import Candidate
from aislobsterble.rack import Rack
from aislobsterble.tile import Axis, Tile

log = logging.getLogger("aislobsterble.engine")


class MoveEngine:
    """Finds every legal, dictionary-valid play for a board and rack.

    This is a brute-force search: every empty start cell, both axes, every
    length, every subset of rack tiles and every ordering of that subset.
    It relies on racks being small (7 tiles) and boards being modest.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        exhaustive_blank_limit: int = EXHAUSTIVE_BLANK_LIMIT,
        prefill_letters: Sequence[str] = COMMON_BLANK_LETTERS,
    ):
        if not prefill_letters:
            raise ValueError("prefill_letters must not be empty")
        self.dict = dictionary
        self.exhaustive_blank_limit = exhaustive_blank_limit
        self.prefill_letters = tuple(prefill_letters)

    # public API

    def find_best_moves(self, board: BoardState, rack: Rack, top_n: int | None = None) -> list[Candidate]:
        """All distinct candidates, highest score first (stable for ties)."""
        t0 = time.time()
        seen: set[tuple] = set()
        unique: list[Candidate] = []
        for candidate in self.generate_candidates(board, rack):
            if candidate.placement not in seen:
                seen.add(candidate.placement)
                unique.append(candidate)
        unique.sort(key=lambda c: c.score, reverse=True)
        log.info(
            "Found %d candidates for rack [%s] in %.2fs", len(unique), rack, time.time() - t0,
        )
        return unique if top_n is None else unique[:top_n]

    def generate_candidates(self, board: BoardState, rack: Rack) -> Iterator[Candidate]:
        """Lazily yield candidates; may repeat identical placements."""
        for resolved in self.resolve_blanks(rack):
            yield from self._generate_for_rack(board, resolved)

    # blank resolution

    def resolve_blanks(self, rack: Rack) -> Iterator[Rack]:
        """Yield blank-free racks for every letter assignment tried.

        The last ``exhaustive_blank_limit`` blanks are tried against the full
        alphabet; earlier blanks are pre-filled from ``prefill_letters`` in
        rotation. With more blanks than the limit the true optimum can be missed.
        """
        blanks = rack.blank_count
        prefilled = max(0, blanks - self.exhaustive_blank_limit)

        queue: deque[tuple[str, ...]] = deque([()])
        while queue:
            letters = queue.popleft()
            if len(letters) == blanks:
                yield rack.fill_blanks(letters)
                continue
            if len(letters) < prefilled:
                rotation = self.prefill_letters[len(letters) % len(self.prefill_letters)]
                queue.append(letters + (rotation,))
            else:
                queue.extend(letters + (ch,) for ch in ALPHABET)

    # placement search

    def _generate_for_rack(self, board: BoardState, rack: Rack) -> Iterator[Candidate]:
        tiles = rack.tiles
        size = len(tiles)
        for start in board.empty_cells():
            for axis in Axis:
                for length in range(1, size + 1):
                    # Positions depend only on the tile count, so probe with any L tiles
                    try:
                        probe = board.build_placement(start, tiles[:length], axis)
                    except PlacementError:
                        break
                    if not (board.is_connected(probe) or board.is_through_center(probe)):
                        continue
                    yield from self._try_orderings(board, tiles, start, axis, length)

    def _try_orderings(
        self,
        board: BoardState,
        tiles: Sequence[Tile],
        start: tuple[int, int],
        axis: Axis,
        length: int,
    ) -> Iterator[Candidate]:
        for combo in combinations(len(tiles), length):
            for order in permutations(combo):
                try:
                    placement = board.build_placement(start, [tiles[i] for i in order], axis)
                except PlacementError as exc:
                    log.debug("Skipping ordering at %s %s: %s", start, axis.name, exc)
                    continue
                words = board.words_created(placement)
                if not all(word in self.dict for word in words):
                    continue
                yield Candidate(placement, board.score(placement), words, board.primary_axis(placement))
