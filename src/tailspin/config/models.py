"""Pydantic models for Tailspin configuration."""

from pathlib import Path

from pydantic import BaseModel, Field


class WebConfig(BaseModel):
    """Configuration for the Tailspin web server."""

    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    debug: bool = False
    secret_key: str = ""
    seed_file: Path | None = None  # None = built-in campaigns
    currency_symbol: str = "$"
