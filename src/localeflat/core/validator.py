from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the run configuration assembled from defaults and command-line
overrides: coerces types, fills missing keys and reports every adjustment
as a warning (or raises in strict mode).
"""

import logging
from typing import Any, Dict, List, Tuple

from localeflat.domain.config import get_default_config
from localeflat.domain.constants import DEFAULT_EXTENSIONS, locale_dir_segments

logger = logging.getLogger(__name__)


def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise TypeError/ValueError instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and the
                                          warnings produced on the way.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if v is not None})

    unknown = sorted(set(config) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown configuration key '{key}' ignored.")
        merged.pop(key, None)

    # Strings
    for key in ("input_path", "output_path", "locale_dir"):
        value = merged[key]
        if not isinstance(value, str):
            _reject(f"'{key}' must be a string, received {type(value).__name__}.", strict, warnings)
            merged[key] = defaults[key]

    segments = locale_dir_segments(merged["locale_dir"])
    if not segments:
        _reject("'locale_dir' is empty; falling back to the default.", strict, warnings)
        segments = locale_dir_segments(defaults["locale_dir"])
    merged["locale_dir"] = "/".join(segments)

    # Booleans
    for key in ("include_source_file", "sort_files"):
        value = merged[key]
        if not isinstance(value, bool):
            _reject(f"'{key}' must be a boolean, received {value!r}.", strict, warnings)
            merged[key] = _as_bool(value, defaults[key])

    # Extensions
    merged["extensions"] = _normalize_extensions(merged["extensions"], strict, warnings)

    # Indentation
    indent = merged["indent"]
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        _reject(f"'indent' must be a non-negative integer, received {indent!r}.", strict, warnings)
        merged["indent"] = defaults["indent"]

    for w in warnings:
        logger.debug(f"Config adjustment: {w}")
    return merged, warnings


def _normalize_extensions(value: Any, strict: bool, warnings: List[str]) -> List[str]:
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        _reject(f"'extensions' must be a list, received {type(value).__name__}.", strict, warnings)
        return list(DEFAULT_EXTENSIONS)

    out: List[str] = []
    for item in value:
        ext = str(item).strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in out:
            out.append(ext)

    if not out:
        _reject("'extensions' is empty; falling back to the defaults.", strict, warnings)
        return list(DEFAULT_EXTENSIONS)
    return out


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        return default
    if isinstance(value, int):
        return bool(value)
    return default


def _reject(msg: str, strict: bool, warnings: List[str]) -> None:
    if strict:
        raise ValueError(msg)
    warnings.append(msg)
