"""Configuration management for the nómina service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv
from sqlalchemy.engine import URL


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    database_url: str
    db_host: str
    db_port: int
    db_name: str | None
    db_pool_size: int
    db_pool_timeout: float
    host: str
    port: int
    debug: bool
    log_level: str
    frontend_dir: str | None

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables.

        ``DATABASE_URL`` wins when set; otherwise the URL is assembled from
        the individual ``DB_*`` variables.
        """
        load_dotenv()

        db_host = os.getenv("DB_HOST", "localhost")
        db_port = int(os.getenv("DB_PORT", "5432"))
        db_name = os.getenv("DB_DATABASE") or None

        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            database_url = URL.create(
                os.getenv("DB_DRIVER", "postgresql+asyncpg"),
                username=os.getenv("DB_USER") or None,
                password=os.getenv("DB_PASSWORD") or None,
                host=db_host,
                port=db_port,
                database=db_name,
            ).render_as_string(hide_password=False)

        return cls(
            database_url=database_url,
            db_host=db_host,
            db_port=db_port,
            db_name=db_name,
            db_pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
            db_pool_timeout=float(os.getenv("DB_POOL_TIMEOUT", "30")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3001")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            frontend_dir=os.getenv("FRONTEND_DIR") or None,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
