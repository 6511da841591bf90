"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with no environment at all; in a deployment you should at
least override ``SECRET_KEY`` and ``DATABASE_URL``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Artfolio Marketplace API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "artfolio.db")

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` allows any origin, matching the behaviour browsers saw from
    # the previous deployment.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Public address of this server, handed out to clients through
    # ``/config.json``.
    server_url: str = os.getenv("SERVER_URL", "http://localhost")
    server_port: int = int(os.getenv("SERVER_PORT", os.getenv("PORT", "3000")))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
