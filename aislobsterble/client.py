"""HTTP client for the Slobsterble game service."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from aislobsterble.config import BotConfig
from aislobsterble.errors import TransportError
from aislobsterble.models import GameInfo, GameState, TokenPair

log = logging.getLogger("aislobsterble.client")


class SlobsterbleClient:
    """Thin, synchronous wrapper over the game service's JSON API.

    Public methods never raise on transport problems: failures are logged
    and reported as ``None`` / ``False`` so the caller can defer the turn.
    """

    def __init__(self, config: BotConfig, session: requests.Session | None = None):
        self.config = config
        self.session = session or requests.Session()
        self.tokens: TokenPair | None = None

    # API

    def list_games(self) -> list[GameInfo] | None:
        try:
            data = self._json(self._request("GET", "api/games"))
            return [GameInfo.model_validate(game) for game in data]
        except (TransportError, ValidationError, TypeError) as e:
            log.error("Error fetching games list: %s", e)
            return None

    def fetch_game_state(self, game_id: str) -> GameState | None:
        try:
            data = self._json(self._request("GET", f"api/game/{game_id}"))
            return GameState.model_validate(data)
        except (TransportError, ValidationError) as e:
            log.error("Error fetching game state for game %s: %s", game_id, e)
            return None

    def submit_play(self, game_id: str, tiles: list[dict[str, Any]]) -> bool:
        try:
            self._request("POST", f"api/game/{game_id}", json=tiles)
        except TransportError as e:
            log.warning("Play rejected for game %s: %s", game_id, e)
            return False
        return True

    # plumbing

    def _url(self, path: str) -> str:
        return self.config.root_url + path

    def _login(self) -> TokenPair:
        response = self._send(
            "POST",
            "api/login",
            json={"username": self.config.username, "password": self.config.password},
        )
        try:
            return TokenPair.model_validate(self._json(response))
        except ValidationError as e:
            raise TransportError(f"Malformed login response: {e}") from e

    def _auth_header(self) -> dict[str, str]:
        if self.tokens is None or self.tokens.access_token.is_almost_expired():
            log.info("Logging in to %s as %s", self.config.root_url, self.config.username)
            self.tokens = self._login()
        return {"Authorization": f"Bearer {self.tokens.access_token.token}"}

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        return self._send(method, path, headers=self._auth_header(), **kwargs)

    def _send(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        try:
            response = self.session.request(
                method, self._url(path), timeout=self.config.request_timeout_seconds, **kwargs,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"{method} {path} failed: {e}") from e
        return response

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON in response: {e}") from e
