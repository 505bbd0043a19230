"""Configuration management for nickname-service."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NICKNAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Generation settings
    max_retries: int = Field(default=50, ge=0, description="Generation attempts per call")
    use_number_suffix: bool = Field(
        default=True, description="Append a random numeric suffix to generated nicknames"
    )
    suffix_min: int = Field(default=10, ge=0, description="Smallest numeric suffix (inclusive)")
    suffix_max: int = Field(default=999, ge=0, description="Largest numeric suffix (inclusive)")
    random_seed: int | None = Field(
        default=None, description="Seed for the shared random source (None = OS entropy)"
    )

    # Filter settings
    use_latin_wordlist: bool = Field(
        default=True, description="Check candidates against the bundled Latin word list"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    @model_validator(mode="after")
    def _check_suffix_range(self) -> "Settings":
        if self.suffix_min > self.suffix_max:
            raise ValueError(
                f"suffix_min ({self.suffix_min}) must not exceed suffix_max ({self.suffix_max})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
