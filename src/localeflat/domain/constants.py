from __future__ import annotations

"""
Domain Constants.

Centralizes the locale-file discovery convention, the recognized data
extensions and the keys used by the annotated output variant.
"""

from typing import List, Tuple

APP_NAME = "localeflat"
APP_VERSION = "0.1.0"

# Locale files live directly inside a directory whose trailing path
# segments match this convention (Rails style: <project>/config/locales).
DEFAULT_LOCALE_DIR = "config/locales"
DEFAULT_EXTENSIONS: List[str] = [".yml", ".yaml"]

# Annotated variant record keys
TRANSLATION_KEY = "translation"
FILE_KEY = "file"

KEY_SEPARATOR = "."
DEFAULT_INDENT = 2


def locale_dir_segments(locale_dir: str) -> Tuple[str, ...]:
    """Split a locale directory convention into its path segments."""
    normalized = (locale_dir or "").replace("\\", "/")
    return tuple(part for part in normalized.split("/") if part not in ("", "."))
