"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Pricebook"

    # Database
    database_url: str = "sqlite:///./data/db.sqlite"
    database_echo: bool = False

    # Logging
    log_level: str = "INFO"

    # Identity
    user_id_header: str = "X-User-Id"  # Set by the upstream identity provider

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
