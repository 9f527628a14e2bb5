"""Configuration management for the demonstration refiner."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REFINER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Goal deduction
    task_prefix: str = Field("task-", description="Target prefix marking checklist items")

    # Teaching shell
    min_script_length: int = Field(1, ge=1, description="Minimum refined actions worth suggesting")

    # Logging
    log_level: str = Field("INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(False, description="Render logs as JSON")


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
