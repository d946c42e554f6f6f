"""Persistent application settings and the defaults applied at start-up."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

__all__ = [
    "Settings",
    "LANGUAGES",
    "STYLES",
    "validate_settings",
    "change_language",
    "change_style",
]

LANGUAGES: tuple[str, ...] = ("zh", "tw", "en", "fr", "de", "it", "ja", "ko", "pt", "es")
STYLES: tuple[str, ...] = ("dark", "light")

_PROFILES_KEY = "settings/profiles"
_STYLE_KEY = "settings/style"
_LOCALE_KEY = "settings/locale"


class Settings:
    """Key/value settings kept in a JSON file; keys look like ``group/name``."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._values: dict[str, Any] = {}
        if self.path.exists():
            text = self.path.read_text(encoding="utf-8")
            if text.strip():
                data = json.loads(text)
                if not isinstance(data, dict):
                    raise ValueError(f"{self.path}: settings must be a JSON object")
                self._values = data

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        self._values[key] = value

    def contains(self, key: str) -> bool:
        """Return whether a value is stored under ``key``."""
        return key in self._values

    def save(self) -> None:
        """Write all values to the settings file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._values, indent=2, sort_keys=True), encoding="utf-8")

    def __contains__(self, key: object) -> bool:
        return key in self._values


def validate_settings(settings: Settings, app_dir: str | os.PathLike[str]) -> None:
    """Fill in the profile file, style and locale if they are missing."""
    if not settings.contains(_PROFILES_KEY):
        settings.set(_PROFILES_KEY, f"{os.fspath(app_dir)}/profiles.json")
    if not settings.contains(_STYLE_KEY):
        settings.set(_STYLE_KEY, "dark")
    if not settings.contains(_LOCALE_KEY):
        settings.set(_LOCALE_KEY, "en")


def change_language(settings: Settings, language: str) -> bool:
    """Select a language; return True if it changed and a restart is needed."""
    if language not in LANGUAGES:
        raise ValueError(f"unknown language {language!r}")
    if settings.get(_LOCALE_KEY) == language:
        return False
    settings.set(_LOCALE_KEY, language)
    return True


def change_style(settings: Settings, style: str) -> bool:
    """Select a style; return True if it changed and a restart is needed."""
    if style not in STYLES:
        raise ValueError(f"unknown style {style!r}")
    if settings.get(_STYLE_KEY) == style:
        return False
    settings.set(_STYLE_KEY, style)
    return True