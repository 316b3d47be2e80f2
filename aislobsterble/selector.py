"""Choose and submit a play from the ranked candidates."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, NamedTuple, Protocol

from aislobsterble.constants import MAX_PLAY_ATTEMPTS
from aislobsterble.models import GameState
from aislobsterble.move import Candidate

log = logging.getLogger("aislobsterble")


class GameService(Protocol):
    """What the selector needs from the transport."""

    def submit_play(self, game_id: str, tiles: list[dict[str, Any]]) -> bool: ...

    def fetch_game_state(self, game_id: str) -> GameState | None: ...


class ScoreCheck(NamedTuple):
    """Locally computed score vs. the score the server reported."""

    expected: int
    reported: int | None

    @property
    def matches(self) -> bool:
        return self.expected == self.reported


class PlaySelector:
    """Submits the best candidates in order until one is accepted."""

    def __init__(self, service: GameService, max_attempts: int = MAX_PLAY_ATTEMPTS, check_score: bool = False):
        self.service = service
        self.max_attempts = max_attempts
        self.check_score = check_score
        self.last_check: ScoreCheck | None = None

    @staticmethod
    def rank(candidates: Iterable[Candidate]) -> list[Candidate]:
        """Highest score first; ties keep their original order."""
        return sorted(candidates, key=lambda c: c.score, reverse=True)

    def play(self, game_id: str, candidates: Iterable[Candidate]) -> Candidate | None:
        """Submit up to ``max_attempts`` candidates; return the accepted one."""
        self.last_check = None
        ranked = self.rank(candidates)
        if not ranked:
            log.error("No legal play found for game %s", game_id)
            return None

        for attempt, candidate in enumerate(ranked[:self.max_attempts], start=1):
            if self.service.submit_play(game_id, candidate.to_payload()):
                log.info("Game %s: played %r (attempt %d)", game_id, candidate, attempt)
                if self.check_score:
                    self.last_check = self.verify_score(game_id, candidate)
                return candidate
            log.warning("Game %s: play %r rejected (attempt %d)", game_id, candidate, attempt)

        log.error(
            "Game %s: all %d attempted plays were rejected",
            game_id, min(len(ranked), self.max_attempts),
        )
        return None

    def verify_score(self, game_id: str, candidate: Candidate) -> ScoreCheck | None:
        """Compare the server's score for the move just played with ours.

        A mismatch is only reported; the move has already happened.
        """
        state = self.service.fetch_game_state(game_id)
        if state is None:
            log.warning("Game %s: could not re-fetch state to verify score", game_id)
            return None
        prev_move = state.prev_move
        if prev_move is None or prev_move.player_id != state.fetcher_player_id:
            # The opponent may already have replied
            log.warning("Game %s: last move is not ours, cannot verify score", game_id)
            return None
        check = ScoreCheck(candidate.score, prev_move.score)
        if not check.matches:
            log.warning(
                "Game %s: score mismatch for %r: computed %d, server reported %s",
                game_id, candidate, check.expected, check.reported,
            )
        else:
            log.debug("Game %s: score verified (%d)", game_id, check.expected)
        return check
