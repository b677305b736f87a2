"""Configuration for the winmail.dat unpacking script."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils import safe_filename

# Load .env early so BaseSettings can pick values up seamlessly.
load_dotenv()


class Settings(BaseSettings):
    """App configuration derived from environment variables."""

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    output_dir: Path = Field(Path("."), alias="TNEF_OUTPUT_DIR")
    overwrite: bool = Field(False, alias="TNEF_OVERWRITE")
    prefer_transport_filename: bool = Field(False, alias="TNEF_PREFER_TRANSPORT_FILENAME")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("output_dir", mode="before")
    @classmethod
    def _empty_str_to_default(cls, value):
        if isinstance(value, str) and value.strip() == "":
            return Path(".")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if value is None:
            return "INFO"
        level = str(value).strip().upper() or "INFO"
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def attachment_filename(self, title: str, transport_filename: str | None) -> str:
        """Pick the on-disk name for an attachment, stripped of path components."""
        if self.prefer_transport_filename and transport_filename:
            return safe_filename(transport_filename)
        return safe_filename(title or transport_filename or "")
