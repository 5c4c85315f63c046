"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden by an environment variable or .env entry
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Game server gateway is configured here (strategy, timeout, retries) and injected
      into the private game service, never read as a module-level literal
    - Defaults work out-of-the-box with docker-compose and the static game server link
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from app.core.domain_types import GatewayStrategy


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://games:games@db:5432/games"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Game server gateway
    game_server_strategy: GatewayStrategy = GatewayStrategy.STATIC
    game_server_static_link: str = "http://localhost:3000/api/privateGames"
    game_server_url: str = "http://localhost:3000"
    game_server_endpoint_path: str = "/api/privateGames"
    game_server_timeout_seconds: float = 10.0
    game_server_max_retries: int = 0

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Seed data
    seed_data_dir: str = "data"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
