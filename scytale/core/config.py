from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from scytale.services.analysis.frequency import NGRAM_PAD


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCYTALE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: Literal["development", "production"] = "development"
    log_level: str = "WARNING"

    # Input limits
    max_text_length: int = 100_000

    # Frequency analysis
    default_ngram_length: int = 2
    ngram_pad: str = NGRAM_PAD

    # Key files
    key_file_encoding: str = "utf-8"

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
