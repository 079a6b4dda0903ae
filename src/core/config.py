"""
Configuration and logging setup for the board client.

- Loads a .env file from the working directory if present, then reads environment variables.
- Exposes SETTINGS with the knobs used across the project (service URL, timeout, name store, theme).
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Callable

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _get(name: str, default: Any, cast: Callable[[Any], Any] | None = None) -> Any:
    env = os.environ.get(name)
    if env is not None:
        return cast(env) if cast else env
    return default


@dataclass(frozen=True)
class Settings:
    # Remote game service
    service_url: str
    request_timeout_s: float

    # Name store (labeled key-value store for player display names)
    database_url: str

    # Presentation
    default_theme: str
    log_level: str

    def with_overrides(self, **changes: Any) -> "Settings":
        """Copy with the given fields replaced; None values are ignored (handy for CLI flags)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings() -> Settings:
    return Settings(
        service_url=_get("CHESS_CLIENT_SERVICE_URL", "http://localhost:8080"),
        request_timeout_s=_get("CHESS_CLIENT_TIMEOUT_S", 10.0, cast=float),
        database_url=_get("CHESS_CLIENT_DATABASE_URL", "sqlite:///chess_client.db"),
        default_theme=_get("CHESS_CLIENT_THEME", "arial"),
        log_level=_get("CHESS_CLIENT_LOG_LEVEL", "INFO"),
    )


SETTINGS = load_settings()


def parse_log_level(name: str | None) -> int:
    name = (name or "INFO").upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(level: str | None = None) -> None:
    """Route every module logger to stderr with a single format."""
    logging.basicConfig(level=parse_log_level(level or SETTINGS.log_level), format=LOG_FORMAT)
