"""Centralized engine configuration.

Single source of truth for runtime settings of the reader and writer
boundaries. Reads from environment variables (and a local ``.env`` file)
with sensible defaults. The style engine itself reads no configuration.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass
class EngineSettings:
    """Engine settings loaded from environment.

    Usage:
        settings = get_settings()
        print(settings.strict_import)  # True
        print(settings.reserved_style_entries)  # 0
    """
    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Style table
    reserved_style_entries: int = 0

    # Reader
    strict_import: bool = True


def _load_settings_from_env() -> EngineSettings:
    """Load engine settings from environment variables."""
    load_dotenv()
    settings = EngineSettings()

    settings.log_level = os.getenv("NANOSHEET_LOG_LEVEL", "INFO").upper()
    settings.log_file = os.getenv("NANOSHEET_LOG_FILE") or None

    if os.getenv("NANOSHEET_RESERVED_STYLE_ENTRIES"):
        settings.reserved_style_entries = int(os.getenv("NANOSHEET_RESERVED_STYLE_ENTRIES"))
        if settings.reserved_style_entries < 0:
            raise ValueError("NANOSHEET_RESERVED_STYLE_ENTRIES must be >= 0")

    settings.strict_import = os.getenv("NANOSHEET_STRICT_IMPORT", "1").lower() in ("1", "true", "yes")

    return settings


# Singleton instance
_settings: EngineSettings | None = None


def get_settings() -> EngineSettings:
    """Get the engine settings singleton.

    Settings are loaded once from environment on first access.
    """
    global _settings
    if _settings is None:
        _settings = _load_settings_from_env()
    return _settings


def reload_settings() -> EngineSettings:
    """Force reload settings from environment.

    Useful for testing or after env changes.
    """
    global _settings
    _settings = _load_settings_from_env()
    return _settings
