"""Centralized application settings using pydantic settings."""

from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_URL = "sqlite:///./data/products.db"

# Load environment variables from a .env file in the project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path, override=False)


class Settings(BaseSettings):
    """Environment-aware configuration (database, listener, logging)."""

    # Application settings
    app_name: str = "Product CRUD API"
    app_version: str = "v1"
    log_level: str = "INFO"

    # Database settings
    database_url: str = Field(
        default=DEFAULT_DATABASE_URL,
        description="SQLAlchemy connection URL for the products database",
    )
    database_echo: bool = Field(
        default=False,
        description="Log every SQL statement issued by the engine",
    )

    # Listener settings
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8080, description="Port to listen on")
    https_port: int | None = Field(
        default=None,
        description="When set, plain HTTP requests are redirected to HTTPS",
    )

    # CORS settings - stored as string, converted to list via property
    cors_origins_raw: str | None = Field(
        default=None,
        validation_alias="CORS_ORIGINS",
        description="Comma-separated list of allowed CORS origins",
        exclude=True,
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS from comma-separated string to list."""
        if self.cors_origins_raw is None or not self.cors_origins_raw.strip():
            return ["*"]
        origins = [
            origin.strip().rstrip("/")
            for origin in self.cors_origins_raw.split(",")
            if origin.strip()
        ]
        return origins if origins else ["*"]

    @field_validator("database_url", mode="before")
    @classmethod
    def default_blank_database_url(cls, v: str | None) -> str:
        """Fall back to the bundled SQLite file when DATABASE_URL is blank."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_DATABASE_URL
        return v

    @field_validator("https_port", mode="before")
    @classmethod
    def blank_https_port(cls, v: str | int | None) -> int | str | None:
        """Treat an empty HTTPS_PORT as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    """Provide singleton-like access for dependency injection."""
    return Settings()
