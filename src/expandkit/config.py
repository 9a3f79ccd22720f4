"""Configuration management for expandkit."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("CORS_ALLOW_ORIGINS")
    if cors_env:
        return cors_env.split(",")
    return ["*"]


class Settings(BaseModel):
    """Application settings."""

    # Settings file looked up from the template folder upwards
    settings_file_name: str = os.getenv("TEMPLATE_SETTINGS_FILE", "build.ini")

    # Section supplying macro values ("" is the root section)
    settings_section: str = os.getenv("TEMPLATE_SETTINGS_SECTION", "")

    # Changelog looked up from the template folder upwards
    release_notes_file_name: str = os.getenv("RELEASE_NOTES_FILE", "CHANGES.md")

    # Resolve object attributes regardless of case
    ignore_case: bool = os.getenv("TEMPLATE_IGNORE_CASE", "false").lower() == "true"

    # Tab width used when converting tabs to spaces
    tab_size: int = int(os.getenv("TAB_SIZE", "4"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE")

    # Server settings
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    # CORS settings (comma-separated list of allowed origins, or * for all)
    cors_allow_origins: list[str] = _parse_cors_origins()


settings = Settings()
