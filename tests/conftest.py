"""Shared fixtures: small boards, tiny dictionaries and a fake HTTP session."""

from __future__ import annotations

import json
from typing import Any

import pytest

from aislobsterble.board import BoardState
from aislobsterble.config import BotConfig
from aislobsterble.dictionary import Dictionary
from aislobsterble.tile import Modifier, Tile

VALUES = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2, "H": 4, "I": 1,
    "J": 8, "K": 5, "L": 1, "M": 3, "N": 1, "O": 1, "P": 3, "Q": 10, "R": 1,
    "S": 1, "T": 1, "U": 1, "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10,
}


def tile(letter: str | None, blank: bool = False) -> Tile:
    """Tile with the standard test value (0 for blanks)."""
    if letter is None or blank:
        return Tile(letter, 0, True)
    return Tile(letter, VALUES[letter])


def blank() -> Tile:
    return Tile(None, 0, True)


@pytest.fixture
def cat_board() -> BoardState:
    """5x5 board with CAT across row 2 (cols 1-3) and a few modifiers."""
    modifiers = [
        ((3, 1), Modifier(1, 2)),
        ((4, 1), Modifier(2, 1)),
        ((3, 2), Modifier(3, 1)),
        ((3, 3), Modifier(1, 2)),
    ]
    tiles = [((2, 1), tile("C")), ((2, 2), tile("A")), ((2, 3), tile("T"))]
    return BoardState(5, 5, modifiers, tiles)


@pytest.fixture
def empty_board() -> BoardState:
    return BoardState(5, 5)


@pytest.fixture
def small_dictionary() -> Dictionary:
    return Dictionary(["cat", "act", "at", "ta", "cats", "cow", "scat"])


def tile_json(letter: str | None, value: int, is_blank: bool = False) -> dict[str, Any]:
    return {"letter": letter, "is_blank": is_blank, "value": value}


def game_state_json(
    *,
    rack: list[tuple[str | None, int, int]],
    board: list[tuple[int, int, str, int]] = (),
    rows: int = 5,
    columns: int = 5,
    modifiers: list[tuple[int, int, int, int]] = (),
    turn_number: int = 1,
    fetcher_player_id: int = 2,
    prev_score: int | None = None,
    prev_player_id: int = 2,
) -> dict[str, Any]:
    """Game snapshot as the server sends it. Player 2 moves on odd turns."""
    return {
        "board_state": [
            {"tile": tile_json(letter, value), "row": r, "column": c}
            for r, c, letter, value in board
        ],
        "game_players": [
            {"score": 0, "turn_order": 0, "num_tiles_remaining": 7,
             "player": {"id": 1, "display_name": "Human"}},
            {"score": 0, "turn_order": 1, "num_tiles_remaining": 7,
             "player": {"id": 2, "display_name": "AI Slobsterble"}},
        ],
        "board_layout": {
            "rows": rows,
            "columns": columns,
            "modifiers": [
                {"row": r, "column": c,
                 "modifier": {"word_multiplier": wm, "letter_multiplier": lm}}
                for r, c, lm, wm in modifiers
            ],
        },
        "turn_number": turn_number,
        "whose_turn_name": "AI Slobsterble",
        "num_tiles_remaining": 80,
        "rack": [
            {"tile": tile_json(letter, value, letter is None), "count": count}
            for letter, value, count in rack
        ],
        "prev_move": None if prev_score is None else {
            "word": "CAT", "score": prev_score, "player_id": prev_player_id,
            "display_name": "AI Slobsterble", "exchanged_count": 0,
        },
        "fetcher_player_id": fetcher_player_id,
    }


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def raise_for_status(self) -> None:
        import requests

        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Records requests and answers from a (method, path) -> responses table."""

    def __init__(self, root_url: str = "http://game.test/"):
        self.root_url = root_url
        self.routes: dict[tuple[str, str], list[FakeResponse]] = {}
        self.calls: list[dict[str, Any]] = []

    def add(self, method: str, path: str, *responses: FakeResponse) -> None:
        self.routes.setdefault((method, path), []).extend(responses)

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        path = url[len(self.root_url):]
        self.calls.append({"method": method, "path": path, **kwargs})
        queue = self.routes.get((method, path))
        if not queue:
            return FakeResponse(404, {"error": "not found"})
        # The last response repeats
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def paths(self, method: str | None = None) -> list[str]:
        return [c["path"] for c in self.calls if method is None or c["method"] == method]


def token_pair_json(expires_in: int = 3600) -> dict[str, Any]:
    import time

    expiry = str(int(time.time()) + expires_in)
    return {
        "access_token": {"token": "access-abc", "expiration_date": expiry},
        "refresh_token": {"token": "refresh-xyz", "expiration_date": expiry},
    }


@pytest.fixture
def bot_config() -> BotConfig:
    return BotConfig(
        root_url="http://game.test",
        username="robot",
        password="secret",
        display_name="AI Slobsterble",
        poll_interval_seconds=1,
    )


@pytest.fixture
def fake_session() -> FakeSession:
    session = FakeSession()
    session.add("POST", "api/login", FakeResponse(200, token_pair_json()))
    return session
