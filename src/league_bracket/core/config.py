from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MissingCredentialError(RuntimeError):
    """A required API credential is not configured."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # DB
    database_url: str = Field(
        default="sqlite+aiosqlite:///./league_bracket.db",
        validation_alias="DATABASE_URL",
    )
    db_echo: bool = False

    # challonge
    challonge_api_key: str | None = Field(default=None, repr=False)
    challonge_base_url: str = "https://api.challonge.com/v1"
    http_timeout_s: float = 30.0

    # import defaults
    default_match_spacing_minutes: int = 30

    log_level: str = "INFO"

    def require_challonge_api_key(self) -> str:
        if not self.challonge_api_key:
            raise MissingCredentialError(
                "CHALLONGE_API_KEY is not set. Set it in the environment or .env file."
            )
        return self.challonge_api_key


settings = Settings()
