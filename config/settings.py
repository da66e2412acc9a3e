"""
Configuration settings for the Random Recipe Proxy.
Values come from the environment (or a local .env file).
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

from app.core.cors import OriginPolicy


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application settings
    app_name: str = "Random Recipe Proxy"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000

    # Upstream (Spoonacular) settings
    spoonacular_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SPOONACULAR_API_KEY", "RECIPE_SPOONACULAR_API_KEY"),
    )
    spoonacular_base_url: str = "https://api.spoonacular.com"

    # CORS allow-list
    cors_exact_origins: List[str] = ["https://reav.space"]
    cors_origin_suffixes: List[str] = [".reav.space"]
    cors_dev_markers: List[str] = ["localhost"]

    class Config:
        env_file = ".env"
        env_prefix = "RECIPE_"
        populate_by_name = True
        extra = "ignore"

    @field_validator("spoonacular_api_key")
    @classmethod
    def _blank_key_is_missing(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @property
    def api_key_configured(self) -> bool:
        return bool(self.spoonacular_api_key)

    def origin_policy(self) -> OriginPolicy:
        """Build the CORS allow-list policy from the configured origins."""
        return OriginPolicy(
            exact_origins=frozenset(self.cors_exact_origins),
            suffixes=frozenset(self.cors_origin_suffixes),
            markers=frozenset(self.cors_dev_markers),
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
