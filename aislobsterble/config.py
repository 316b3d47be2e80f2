"""Bot configuration."""

from dotenv import find_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aislobsterble.constants import MAX_PLAY_ATTEMPTS

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class BotConfig(BaseSettings):
    """Configuration settings for the bot, read from AISLOBSTERBLE_* variables."""

    root_url: str = "http://localhost:8000/"
    """Base URL of the game service. Always ends with '/'."""

    username: str = ""
    password: str = ""

    display_name: str = "AI Slobsterble"
    """Display name of the bot's player, used to spot games where it is to move."""

    poll_interval_seconds: int = 30
    """Seconds to sleep between poll cycles. Default: 30."""

    check_score: bool = False
    """Re-fetch the game after a play and compare the reported score. Default: False."""

    log_level: str = "INFO"

    dictionary_path: str | None = None
    """Word list file. If None (default), conventional file names are searched."""

    max_play_attempts: int = MAX_PLAY_ATTEMPTS
    """Top candidates to try submitting before giving up for this cycle. Default: 10."""

    request_timeout_seconds: float = 10.0
    """Timeout applied by the HTTP client to every request. Default: 10.0."""

    model_config = SettingsConfigDict(
        env_prefix="AISLOBSTERBLE_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("root_url")
    @classmethod
    def _trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else value + "/"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


config = BotConfig()
