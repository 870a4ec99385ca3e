import logging
from functools import cached_property
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # roster-page/

# Parse order matters only for readability; references are resolved across the whole set.
DEFAULT_TEMPLATE_FILES = ["layout.html", "bio.html", "view.html"]


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a working default so the server starts with no .env file.

    Uses Pydantic v2 API:
    - model_config with SettingsConfigDict
    - @field_validator decorator
    - @cached_property for derived values
    """

    # Server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="Server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=3000, description="Server port")
    log_level: str = Field(default="INFO", description="Root log level")

    # Templates
    templates_dir: Path = Field(default=BASE_DIR / "templates", description="Directory holding the fragment files")
    template_files: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TEMPLATE_FILES),
        min_length=1,
        description="Fragment files to load, relative to templates_dir",
    )

    # Rendering
    render_mode: Literal["buffered", "streaming"] = Field(
        default="buffered",
        description="buffered: commit status after a full render; streaming: commit 200 first and stream chunks",
    )

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @cached_property
    def template_paths(self) -> list[Path]:
        """Absolute paths of every fragment file, in load order."""
        return [self.templates_dir / name for name in self.template_files]

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return v

    @field_validator("template_files", mode="after")
    @classmethod
    def validate_template_files(cls, v: list[str]) -> list[str]:
        """Reject blank and duplicate fragment file names."""
        cleaned = [name.strip() for name in v]
        if any(not name for name in cleaned):
            raise ValueError("template_files must not contain empty names")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("template_files must not contain duplicates")
        return cleaned


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    This function creates a singleton to avoid re-reading .env file
    on every request. Use this with FastAPI's Depends() for
    dependency injection.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
