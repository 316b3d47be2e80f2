from itertools import islice

import pytest

from aislobsterble.board import BoardState
from aislobsterble.dictionary import Dictionary
from aislobsterble.engine import MoveEngine
from aislobsterble.rack import Rack
from aislobsterble.tile import Modifier, PlacedTile, Tile

from conftest import blank, tile


class TestResolveBlanks:
    def setup_method(self) -> None:
        self.engine = MoveEngine(Dictionary([]))

    def test_no_blanks(self):
        rack = Rack([tile("A"), tile("B")])
        assert list(self.engine.resolve_blanks(rack)) == [rack]

    def test_one_blank_tries_every_letter(self):
        racks = list(self.engine.resolve_blanks(Rack([tile("A"), blank()])))
        assert len(racks) == 26
        assert {r[1].letter for r in racks} == set("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
        assert all(r[1].is_blank and r[1].value == 0 for r in racks)

    def test_two_blanks_try_all_pairs(self):
        racks = list(self.engine.resolve_blanks(Rack([blank(), blank()])))
        assert len(racks) == 26 * 26
        assert len({(r[0].letter, r[1].letter) for r in racks}) == 676

    def test_extra_blanks_are_prefilled(self):
        racks = list(self.engine.resolve_blanks(Rack([blank(), blank(), blank(), blank()])))
        assert len(racks) == 676
        assert {(r[0].letter, r[1].letter) for r in racks} == {("E", "A")}
        assert all(r.blank_count == 0 for r in racks)

    def test_prefill_rotates(self):
        engine = MoveEngine(Dictionary([]), exhaustive_blank_limit=0, prefill_letters="XY")
        racks = list(engine.resolve_blanks(Rack([blank()] * 3)))
        assert [t.letter for t in racks[0]] == ["X", "Y", "X"]
        assert len(racks) == 1

    def test_empty_prefill_letters_rejected(self):
        with pytest.raises(ValueError):
            MoveEngine(Dictionary([]), prefill_letters="")


class TestFirstMove:
    def setup_method(self) -> None:
        self.board = BoardState(5, 5)
        self.dictionary = Dictionary(["CAT", "ACT", "AT", "TA", "A"])
        self.engine = MoveEngine(self.dictionary)

    def test_every_candidate_covers_center(self):
        moves = self.engine.find_best_moves(self.board, Rack([tile("C"), tile("A"), tile("T")]))
        assert moves
        for move in moves:
            assert self.board.is_through_center(move.placement)

    def test_best_moves(self):
        moves = self.engine.find_best_moves(self.board, Rack([tile("C"), tile("A"), tile("T")]))
        assert moves[0].score == 5
        three_letter = [m for m in moves if len(m.placement) == 3]
        # CAT and ACT, three start cells each, both axes
        assert len(three_letter) == 12
        assert {m.word for m in three_letter} == {"CAT", "ACT"}
        assert [m.score for m in moves] == sorted((m.score for m in moves), reverse=True)

    def test_single_letter_word_on_empty_board(self):
        moves = self.engine.find_best_moves(self.board, Rack([tile("A")]))
        # One-tile plays read the same on both axes, so only one survives
        assert len(moves) == 1
        assert moves[0].words == ["A"]
        assert moves[0].placement == (PlacedTile(2, 2, tile("A")),)

    def test_top_n(self):
        moves = self.engine.find_best_moves(self.board, Rack([tile("C"), tile("A"), tile("T")]), top_n=3)
        assert len(moves) == 3

    def test_generation_is_lazy(self):
        gen = self.engine.generate_candidates(self.board, Rack([tile("C"), tile("A"), tile("T")]))
        first_two = list(islice(gen, 2))
        assert len(first_two) == 2

    def test_blank_resolves_to_needed_letter(self):
        engine = MoveEngine(Dictionary(["CAT"]))
        moves = engine.find_best_moves(self.board, Rack([tile("C"), blank(), tile("T")]))
        assert moves
        assert {m.word for m in moves} == {"CAT"}
        for move in moves:
            blank_tiles = [pt.tile for pt in move.placement if pt.tile.is_blank]
            assert blank_tiles == [Tile("A", 0, True)]
            assert move.score == 3 + 0 + 1


class TestWithBoardTiles:
    def test_candidates_only_use_dictionary_words(self, cat_board, small_dictionary):
        engine = MoveEngine(small_dictionary)
        moves = engine.find_best_moves(cat_board, Rack([tile("S"), tile("C"), tile("O"), tile("W")]))
        assert moves
        for move in moves:
            assert all(word in small_dictionary for word in cat_board.words_created(move.placement))
            assert cat_board.is_connected(move.placement)
            assert cat_board.is_available(move.placement)

    def test_finds_scats(self, cat_board):
        engine = MoveEngine(Dictionary(["cat", "scat", "cats", "scats"]))
        moves = engine.find_best_moves(cat_board, Rack([tile("S"), tile("S")]))
        scats = [m for m in moves if m.word == "SCATS"]
        assert len(scats) == 1
        assert [pt.coord for pt in scats[0].placement] == [(2, 0), (2, 4)]
        assert scats[0].score == 1 + 3 + 1 + 1 + 1

    def test_finds_cow_with_multipliers(self, cat_board, small_dictionary):
        engine = MoveEngine(small_dictionary)
        moves = engine.find_best_moves(cat_board, Rack([tile("W"), tile("O")]))
        assert moves[0].word == "COW"
        assert moves[0].score == (3 + 1 + 4 * 2) * 2

    def test_disconnected_positions_are_excluded(self):
        board = BoardState(7, 7, tiles=[((0, 0), tile("A"))])
        engine = MoveEngine(Dictionary(["AT", "TA"]))
        moves = engine.find_best_moves(board, Rack([tile("A"), tile("T")]))
        assert moves
        for move in moves:
            assert board.is_connected(move.placement) or board.is_through_center(move.placement)
        assert any(board.is_through_center(m.placement) and not board.is_connected(m.placement) for m in moves)

    def test_no_candidates(self, cat_board):
        engine = MoveEngine(Dictionary(["ZZZ"]))
        assert engine.find_best_moves(cat_board, Rack([tile("Q")])) == []


def test_cat_example_on_full_size_board():
    board = BoardState(15, 15, [((7, 7), Modifier(2, 1))])
    engine = MoveEngine(Dictionary(["CAT"]))
    moves = engine.find_best_moves(board, Rack([tile("C"), tile("A"), tile("T"), blank()]))
    by_start = {m.placement[0].coord: m for m in moves if m.placement[0].row == 7
                and not any(pt.tile.is_blank for pt in m.placement)}
    # A doubled on the center cell
    assert by_start[(7, 6)].score == 3 + 1 * 2 + 1
    # C doubled on the center cell is the best play
    assert moves[0].score == 3 * 2 + 1 + 1
    assert moves[0].placement[0].coord == (7, 7)
