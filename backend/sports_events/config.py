"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Event field limits live here and nowhere else (EventRules reads them)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://events:events@db:5432/events"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth provider (Supabase GoTrue)
    supabase_url: str = "http://localhost:54321"
    supabase_anon_key: str = "anon-key-placeholder"
    auth_timeout_seconds: float = 10.0
    site_url: str = "http://localhost:3000"
    session_cookie_name: str = "sb-access-token"
    min_password_length: int = 6

    # Event rules
    max_venues_per_event: int = 10
    max_event_name_length: int = 255  # capped at the events.name column width
    max_description_length: int = 2000
    extra_sport_types: list[str] = []
    default_timezone: str = "UTC"

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 50

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
