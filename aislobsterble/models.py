"""Wire formats exchanged with the game service."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, Field, field_validator

from aislobsterble.tile import Tile

ALMOST_EXPIRED_THRESHOLD = timedelta(seconds=20)


class TileModel(BaseModel):
    letter: str | None = None
    is_blank: bool = False
    value: int = 0

    def to_tile(self) -> Tile:
        """Core Tile; only the first character of ``letter`` is used."""
        letter = self.letter[0].upper() if self.letter else None
        return Tile(letter, self.value, self.is_blank)


class PlayedTileModel(BaseModel):
    tile: TileModel
    row: int
    column: int


class TileCountModel(BaseModel):
    tile: TileModel
    count: int = Field(ge=0)


class ModifierModel(BaseModel):
    word_multiplier: int = 1
    letter_multiplier: int = 1


class PositionedModifierModel(BaseModel):
    row: int
    column: int
    modifier: ModifierModel


class BoardLayoutModel(BaseModel):
    rows: int = Field(gt=0)
    columns: int = Field(gt=0)
    modifiers: list[PositionedModifierModel] = Field(default_factory=list)


class PlayerModel(BaseModel):
    id: int
    display_name: str


class GamePlayerModel(BaseModel):
    score: int = 0
    turn_order: int
    player: PlayerModel
    num_tiles_remaining: int = 0


class PrevMoveModel(BaseModel):
    word: str | None = None
    score: int
    player_id: int
    display_name: str = ""
    exchanged_count: int = 0


class GameState(BaseModel):
    """Snapshot of one game, as seen by the fetching player."""

    board_state: list[PlayedTileModel] = Field(default_factory=list)
    game_players: list[GamePlayerModel]
    board_layout: BoardLayoutModel
    turn_number: int
    whose_turn_name: str = ""
    num_tiles_remaining: int = 0
    rack: list[TileCountModel] = Field(default_factory=list)
    prev_move: PrevMoveModel | None = None
    fetcher_player_id: int


class GamePlayerInfo(BaseModel):
    score: int = 0
    turn_order: int
    player: PlayerModel


class GameInfo(BaseModel):
    """One entry of the game list."""

    id: str
    started: datetime
    completed: datetime | None = None
    whose_turn_name: str
    game_players: list[GamePlayerInfo] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value


class Token(BaseModel):
    token: str
    expiration_date: datetime

    def is_almost_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        expires = self.expiration_date
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=timezone.utc)
        return expires < now + ALMOST_EXPIRED_THRESHOLD


class TokenPair(BaseModel):
    """Login response. The refresh token is not kept; the client logs in again."""

    access_token: Token
