"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from .validate import MAX_DEPTH, MAX_DESCRIPTOR_SIZE

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Renderer settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="PAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Rendering
    max_depth: int = Field(default=MAX_DEPTH, gt=0, description="Max component nesting depth")
    theme_path: str | None = Field(default=None, description="JSON style sheet overriding the default theme")

    # Descriptor loading
    max_descriptor_bytes: int = Field(
        default=MAX_DESCRIPTOR_SIZE, gt=0, description="Max descriptor JSON size (bytes)"
    )
    repair_json: bool = Field(default=True, description="Repair malformed descriptor JSON")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
