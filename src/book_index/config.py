"""Application configuration utilities."""
from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Fixed generation defaults; the tool reads no environment or config file."""

    model_config = ConfigDict(frozen=True)

    default_output: str = Field(default="generated-index.html", description="Output file used when none is given")
    page_title: str = "Springer free book index"
    search_placeholder: str = "Type title, author, or subject then press enter to search"
    toggle_label: str = "Show only title"
    encoding: str = "utf-8"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
