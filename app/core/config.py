from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import DEFAULT_RECOMMENDATION_LIMIT
from app.core.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    APP_NAME: str = "Pinstyle"
    APP_ENV: Literal["development", "production"] = "production"
    PORT: int = 8000
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # JSON list of catalog items; the bundled sample catalog is used when unset
    CATALOG_PATH: Path | None = None

    DEFAULT_RECOMMENDATION_LIMIT: int = DEFAULT_RECOMMENDATION_LIMIT
    MAX_RECOMMENDATION_LIMIT: int = 100


settings = Settings()

APP_VERSION = __version__
