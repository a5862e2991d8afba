"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service and the client can run locally without any setup.
"""

import os
from dataclasses import dataclass

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Integrations API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database.  A relative path is resolved against
    # the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "integrations.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Used by the Payable client (``payable_api.py``).
    client_base_url: str = os.getenv("INTEGRATIONS_BASE_URL", "http://localhost:3000")
    token_file: str = os.getenv("INTEGRATIONS_TOKEN_FILE", "storage.json")

    def __post_init__(self) -> None:
        # Must be a name both logging and uvicorn accept; unknown names become INFO.
        level = self.log_level.strip().upper()
        level = LOG_LEVEL_ALIASES.get(level, level)
        self.log_level = level if level in LOG_LEVELS else "INFO"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
