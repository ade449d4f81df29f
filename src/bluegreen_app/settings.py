# Application-wide configuration helpers.

from __future__ import annotations

import os
from dataclasses import dataclass

_SETTINGS_CACHE: Settings | None = None

DEFAULT_PORT = 3000
DEFAULT_VERSION = "blue"


@dataclass(slots=True, frozen=True)
class Settings:
    """Runtime configuration derived from environment variables."""

    port: int = DEFAULT_PORT
    version: str = DEFAULT_VERSION

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables with sensible defaults.

        Empty values are treated the same as unset ones.
        """
        port_raw = os.getenv("PORT") or str(DEFAULT_PORT)
        version = os.getenv("APP_VERSION") or DEFAULT_VERSION

        try:
            port = int(port_raw)
        except ValueError as exc:
            raise ValueError("PORT must be an integer.") from exc

        if not 0 <= port <= 65535:
            raise ValueError("PORT must be between 0 and 65535.")

        return cls(port=port, version=version)


def get_settings() -> Settings:
    """Return cached settings instance, constructing it on first access."""
    global _SETTINGS_CACHE

    if _SETTINGS_CACHE is None:
        _SETTINGS_CACHE = Settings.from_env()

    return _SETTINGS_CACHE


def set_settings(settings: Settings | None) -> None:
    """Override the cached settings value (mainly intended for tests)."""
    global _SETTINGS_CACHE
    _SETTINGS_CACHE = settings


__all__ = ["DEFAULT_PORT", "DEFAULT_VERSION", "Settings", "get_settings", "set_settings"]
