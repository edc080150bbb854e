"""Configuration management using pydantic-settings."""
from pathlib import Path

from pydantic_settings import BaseSettings

APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream FPL API
    fpl_base_url: str = "https://fantasy.premierleague.com/api"
    request_timeout_seconds: float = 30.0
    user_agent: str = f"fpl-proxy/{APP_VERSION}"

    # Cache settings (one entry per upstream resource)
    bootstrap_cache_ttl_seconds: int = 60
    fixtures_cache_ttl_seconds: int = 60

    # Number of upcoming fixtures returned per team
    fixtures_limit: int = 5

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    static_directory: Path = Path("./public")

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
