"""Engine configuration.

Loads settings from environment variables with sensible defaults.
"""

import math

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Pagination
    page_size: int = Field(default=12, ge=1)

    # Debounce
    settle_delay_seconds: float = Field(default=0.3, ge=0)

    # Price facet
    price_ceiling: float = Field(default=math.inf, ge=0)

    # Brand resolution: brand name -> regex, merged over the built-in table
    brand_patterns: dict[str, str] = Field(default_factory=dict)

    # Logging
    log_level: str = "INFO"
    log_json: bool = True


settings = Settings()
