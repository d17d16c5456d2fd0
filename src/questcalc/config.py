"""Lightweight configuration for questcalc."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from questcalc.domain.enums import OutputLevel


class Settings(BaseSettings):
    """Application settings, read from ``QUESTCALC_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(env_prefix="QUESTCALC_", env_file=".env", env_file_encoding="utf-8")

    macro_file: Path | None = Field(default=None, description="Macro file replayed before manual input")
    show_queries: bool = Field(default=True, description="Echo prompts and macro lines while replaying")
    output_level: OutputLevel = Field(default=OutputLevel.BASIC_OUTPUT, description="Console verbosity")
    catalog_path: Path | None = Field(
        default=None, description="Catalog JSON file; the bundled catalog when unset"
    )
    json_output: Path | None = Field(default=None, description="Where to write solved instances as JSON")
    log_level: str = Field(default="WARNING", description="Logging level for diagnostics on stderr")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
