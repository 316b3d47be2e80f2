"""Poll loop: find games where it is the bot's turn and play them."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from aislobsterble.board import BoardState
from aislobsterble.client import SlobsterbleClient
from aislobsterble.config import BotConfig
from aislobsterble.engine import MoveEngine
from aislobsterble.errors import PlacementError
from aislobsterble.models import GameInfo, GameState
from aislobsterble.move import Candidate
from aislobsterble.rack import Rack
from aislobsterble.selector import PlaySelector

log = logging.getLogger("aislobsterble")


class Controller:
    """Runs poll -> evaluate all active games -> sleep, one cycle at a time."""

    def __init__(
        self,
        config: BotConfig,
        client: SlobsterbleClient,
        engine: MoveEngine,
        selector: PlaySelector | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.client = client
        self.engine = engine
        self.selector = selector or PlaySelector(
            client, max_attempts=config.max_play_attempts, check_score=config.check_score,
        )
        self._sleep = sleep

    @staticmethod
    def filter_active_games(games: list[GameInfo]) -> list[GameInfo]:
        """Games that are not completed."""
        return [game for game in games if game.completed is None]

    def filter_by_ai_name(self, games: list[GameInfo]) -> list[GameInfo]:
        """Games whose turn name matches the bot's display name.

        The game list only exposes a display name, so this is a pre-filter;
        is_ai_turn() makes the real decision from the full game state.
        """
        return [game for game in games if game.whose_turn_name == self.config.display_name]

    @staticmethod
    def is_ai_turn(state: GameState) -> bool:
        """True if the player due to move is the one who fetched the state."""
        if not state.game_players:
            return False
        turn_order = state.turn_number % len(state.game_players)
        for game_player in state.game_players:
            if game_player.turn_order == turn_order:
                return game_player.player.id == state.fetcher_player_id
        return False

    def play_turn(self, game_id: str, state: GameState) -> Candidate | None:
        board = BoardState.from_game_state(state)
        rack = Rack.from_game_state(state)
        log.debug("Game %s board:\n%s", game_id, board)
        log.info("Game %s: searching with rack [%s]", game_id, rack)

        candidates = self.engine.find_best_moves(board, rack)
        if not candidates:
            log.warning("Game %s: no legal play found, skipping this cycle", game_id)
            return None
        return self.selector.play(game_id, candidates)

    def poll(self) -> int:
        """One poll cycle. Returns the number of moves played."""
        games = self.client.list_games()
        if games is None:
            games = []
        candidates = self.filter_by_ai_name(self.filter_active_games(games))
        log.debug("%d of %d games may be waiting on us", len(candidates), len(games))

        played = 0
        for game in candidates:
            state = self.client.fetch_game_state(game.id)
            if state is None:
                continue
            if not self.is_ai_turn(state):
                continue
            try:
                move = self.play_turn(game.id, state)
            except PlacementError as e:
                log.error("Game %s: malformed game state: %s", game.id, e)
                continue
            if move is not None:
                played += 1
        return played

    def run(self, max_cycles: int | None = None) -> None:
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            played = self.poll()
            cycles += 1
            log.info("Poll cycle %d done, %d move(s) played", cycles, played)
            if max_cycles is not None and cycles >= max_cycles:
                break
            self._sleep(self.config.poll_interval_seconds)
