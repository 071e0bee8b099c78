"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the service starts
without any configuration at all, listening on port 8080 and storing
records in ``users.db`` next to the package.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Records API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset only console logging is
    # configured.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module; the special value
    # ``:memory:`` is passed through unchanged.
    database_url: str = os.getenv("DATABASE_URL", "users.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must be
# set before importing this module.
settings = Settings()
