"""Board snapshot: fixed tiles, cell modifiers, placement, words and scoring."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING

from aislobsterble.constants import BINGO_BONUS, BINGO_TILE_COUNT
from aislobsterble.errors import InvariantError, OutOfBounds, StartOccupied
from aislobsterble.tile import Axis, Modifier, PlacedTile, Tile

if TYPE_CHECKING:
    from aislobsterble.models import GameState

Coord = tuple[int, int]

_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_PLAIN = Modifier()


class BoardState:
    """rows x columns board built from one polled snapshot.

    Both grids are flat, row-major tuples of identical size. The board is
    read-only: candidate placements are evaluated against it, never applied.
    """

    __slots__ = ("rows", "columns", "_tiles", "_modifiers")

    def __init__(
        self,
        rows: int,
        columns: int,
        modifiers: Iterable[tuple[Coord, Modifier]] = (),
        tiles: Iterable[tuple[Coord, Tile]] = (),
    ):
        if rows <= 0 or columns <= 0:
            raise ValueError(f"Invalid board dimensions {rows}x{columns}")
        self.rows = rows
        self.columns = columns

        modifier_cells: list[Modifier] = [_PLAIN] * (rows * columns)
        for (row, col), modifier in modifiers:
            modifier_cells[self._offset(row, col)] = modifier

        tile_cells: list[Tile | None] = [None] * (rows * columns)
        for (row, col), tile in tiles:
            tile_cells[self._offset(row, col)] = tile

        self._modifiers: tuple[Modifier, ...] = tuple(modifier_cells)
        self._tiles: tuple[Tile | None, ...] = tuple(tile_cells)

    @classmethod
    def from_game_state(cls, state: GameState) -> BoardState:
        """Build the board from a deserialized game snapshot."""
        layout = state.board_layout
        modifiers = [
            ((pm.row, pm.column), Modifier(pm.modifier.letter_multiplier, pm.modifier.word_multiplier))
            for pm in layout.modifiers
        ]
        tiles = [((pt.row, pt.column), pt.tile.to_tile()) for pt in state.board_state]
        return cls(layout.rows, layout.columns, modifiers, tiles)

    # cells

    @property
    def center(self) -> Coord:
        return (self.rows // 2, self.columns // 2)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def _offset(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col)
        return row * self.columns + col

    def tile_at(self, row: int, col: int) -> Tile | None:
        """Fixed tile at (row, col), or None."""
        return self._tiles[self._offset(row, col)]

    def modifier_at(self, row: int, col: int) -> Modifier:
        return self._modifiers[self._offset(row, col)]

    def is_occupied(self, coord: Coord) -> bool:
        """True if the cell holds a fixed tile. Raises OutOfBounds off the grid."""
        return self._tiles[self._offset(*coord)] is not None

    def empty_cells(self) -> Iterator[Coord]:
        """All empty cells in row-major order."""
        for offset, tile in enumerate(self._tiles):
            if tile is None:
                yield divmod(offset, self.columns)

    def count_tiles(self) -> int:
        return sum(1 for tile in self._tiles if tile is not None)

    # placement checks

    def is_connected(self, placement: Iterable[PlacedTile]) -> bool:
        """True if any placed tile has an up/down/left/right neighbour on the board."""
        for pt in placement:
            for dr, dc in _NEIGHBOURS:
                nr, nc = pt.row + dr, pt.col + dc
                if self.in_bounds(nr, nc) and self._tiles[nr * self.columns + nc] is not None:
                    return True
        return False

    def is_through_center(self, placement: Iterable[PlacedTile]) -> bool:
        center = self.center
        return any(pt.coord == center for pt in placement)

    def is_available(self, placement: Iterable[PlacedTile]) -> bool:
        """True if every target cell is currently empty."""
        return all(not self.is_occupied(pt.coord) for pt in placement)

    def build_placement(self, start: Coord, tiles: Sequence[Tile], axis: Axis) -> tuple[PlacedTile, ...]:
        """Lay ``tiles`` from ``start`` along ``axis``, skipping occupied cells.

        The returned placement holds exactly one PlacedTile per tile given;
        board tiles passed over become part of the word but are not placed upon.
        """
        row, col = start
        if self.is_occupied(start):
            raise StartOccupied(row, col)

        dr, dc = axis.row_delta, axis.col_delta
        placed: list[PlacedTile] = []
        for tile in tiles:
            while True:
                if not self.in_bounds(row, col):
                    raise OutOfBounds(row, col)
                if self._tiles[row * self.columns + col] is None:
                    break
                row += dr
                col += dc
            placed.append(PlacedTile(row, col, tile))
            row += dr
            col += dc
        return tuple(placed)

    # words

    @staticmethod
    def primary_axis(placement: Sequence[PlacedTile]) -> Axis:
        """Axis the placement was laid along.

        A single tile always reads vertically first; any horizontal word it
        forms is then picked up as its cross word.
        """
        if len(placement) >= 2:
            first, second = placement[0], placement[1]
            return Axis.HORIZONTAL if first.row == second.row else Axis.VERTICAL
        return Axis.VERTICAL

    def _is_filled(self, row: int, col: int, placed: dict[Coord, PlacedTile]) -> bool:
        return self.in_bounds(row, col) and (
            self._tiles[row * self.columns + col] is not None or (row, col) in placed
        )

    def _span(
        self, first: Coord, last: Coord, axis: Axis, placed: dict[Coord, PlacedTile]
    ) -> list[Coord]:
        """Cells of the contiguous run along ``axis`` containing first..last."""
        dr, dc = axis.row_delta, axis.col_delta
        row, col = first
        while self._is_filled(row - dr, col - dc, placed):
            row -= dr
            col -= dc
        end_row, end_col = last
        while self._is_filled(end_row + dr, end_col + dc, placed):
            end_row += dr
            end_col += dc

        cells = [(row, col)]
        while (row, col) != (end_row, end_col):
            row += dr
            col += dc
            cells.append((row, col))
        return cells

    def _read(self, cells: Iterable[Coord], placed: dict[Coord, PlacedTile]) -> str:
        letters: list[str] = []
        for row, col in cells:
            tile = self._cell_tile(row, col, placed)
            if tile.letter is None:
                raise InvariantError(f"Unresolved blank at ({row},{col})")
            letters.append(tile.letter.upper())
        return "".join(letters)

    def _cell_tile(self, row: int, col: int, placed: dict[Coord, PlacedTile]) -> Tile:
        pt = placed.get((row, col))
        if pt is not None:
            return pt.tile
        tile = self._tiles[self._offset(row, col)]
        if tile is None:
            raise InvariantError(f"Hole at ({row},{col}) inside a word span")
        return tile

    def _primary_cells(self, placement: Sequence[PlacedTile], placed: dict[Coord, PlacedTile]) -> list[Coord]:
        if not placement:
            raise InvariantError("Empty placement")
        ordered = sorted(placement)
        return self._span(ordered[0].coord, ordered[-1].coord, self.primary_axis(placement), placed)

    def words_created(self, placement: Sequence[PlacedTile]) -> list[str]:
        """Primary word first, then one cross word per tile that forms one.

        Cross words follow the tiles in (row, col) order, whatever order the
        placement lists them in.
        """
        placed = {pt.coord: pt for pt in placement}
        words = [self._read(self._primary_cells(placement, placed), placed)]

        secondary = self.primary_axis(placement).complement
        for pt in sorted(placement):
            cells = self._span(pt.coord, pt.coord, secondary, placed)
            if len(cells) > 1:
                words.append(self._read(cells, placed))
        return words

    # scoring

    def score(self, placement: Sequence[PlacedTile]) -> int:
        """Points for the placement: cross words, primary word, bingo bonus."""
        placed = {pt.coord: pt for pt in placement}
        total = 0
        if len(placement) > 1:
            secondary = self.primary_axis(placement).complement
            for pt in placement:
                total += self._secondary_score(pt, secondary, placed)

        total += self._primary_score(placement, placed)

        if len(placement) == BINGO_TILE_COUNT:
            total += BINGO_BONUS
        return total

    def _secondary_score(self, pt: PlacedTile, axis: Axis, placed: dict[Coord, PlacedTile]) -> int:
        cells = self._span(pt.coord, pt.coord, axis, placed)
        if len(cells) == 1:
            return 0
        # A cross word touches exactly one newly placed tile
        modifier = self.modifier_at(pt.row, pt.col)
        points = 0
        for row, col in cells:
            if (row, col) == pt.coord:
                points += pt.tile.value * modifier.letter_multiplier
            else:
                points += self._cell_tile(row, col, placed).value
        return points * modifier.word_multiplier

    def _primary_score(self, placement: Sequence[PlacedTile], placed: dict[Coord, PlacedTile]) -> int:
        points = 0
        word_multiplier = 1
        for row, col in self._primary_cells(placement, placed):
            if (row, col) in placed:
                modifier = self.modifier_at(row, col)
                points += placed[(row, col)].tile.value * modifier.letter_multiplier
                word_multiplier *= modifier.word_multiplier
            else:
                points += self._cell_tile(row, col, placed).value
        return points * word_multiplier

    def __str__(self) -> str:
        header = "    " + " ".join(f"{c:>2}" for c in range(self.columns))
        sep = "   " + "---" * self.columns
        lines = [header, sep]
        for r in range(self.rows):
            parts = [f"{r:>2} |"]
            for c in range(self.columns):
                tile = self._tiles[r * self.columns + c]
                if tile is not None:
                    parts.append(f" {tile} ")
                elif (r, c) == self.center and self._modifiers[r * self.columns + c].is_plain:
                    parts.append(" * ")
                else:
                    parts.append(f"{self._modifiers[r * self.columns + c].label():>3}")
            lines.append("".join(parts))
        return "\n".join(lines)
