"""
Application configuration loaded from environment variables.
Uses pydantic-settings so every value can be overridden via a .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MOUNTAINS_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # ── Service ──────────────────────────────────────────────────────────────
    app_title: str = "Mountain Service"
    log_level: str = "INFO"

    # ── Server ───────────────────────────────────────────────────────────────
    # Bind address for `mountain-server` / `python -m mountains.main`
    host: str = "127.0.0.1"
    port: int = 8080

    # ── Client ───────────────────────────────────────────────────────────────
    # Default base URI used by MountainConnector.  Must end with a slash.
    client_base_uri: str = "http://localhost:8080/"
    # Per-request timeout in seconds
    client_timeout: float = 10.0


settings = Settings()
