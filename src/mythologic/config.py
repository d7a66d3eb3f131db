"""Configuration management for Mythologic."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MYTHOLOGIC_",
    )

    # Ontology store behaviour
    strict_ids: bool = Field(
        default=False,
        description="Reject inserts that reuse an existing identifier instead of replacing",
    )
    auto_register_relationships: bool = Field(
        default=True,
        description="Register relationship ids on their endpoint entities when inserted",
    )

    # Relationship defaults
    default_strength: float = Field(default=0.5, ge=0.0, le=1.0)

    # Paths
    data_dir: Path = Field(default=Path("data"))

    # Logging
    log_level: str = Field(default="WARNING")

    @property
    def exports_dir(self) -> Path:
        return self.data_dir / "exports"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
