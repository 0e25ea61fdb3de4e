from __future__ import annotations

"""
Locale File Discovery Service.

Walks a project tree and collects every translation file that sits
directly inside a directory matching the locale-dir convention (by default
'config/locales', found at any depth) with a recognized data extension.
"""

import logging
import os
from typing import Iterable, List, Optional, Sequence, Tuple

from localeflat.domain.constants import (
    DEFAULT_EXTENSIONS,
    DEFAULT_LOCALE_DIR,
    locale_dir_segments,
)
from localeflat.domain.models import LocaleFile
from localeflat.infra.fs import relative_posix_path

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def locate(
        root: str,
        locale_dir: str = DEFAULT_LOCALE_DIR,
        extensions: Optional[Sequence[str]] = None,
        sort: bool = True,
) -> List[LocaleFile]:
    """
    Discover locale files under a project root.

    A root that does not exist, or that holds no matching file, yields an
    empty list rather than an error.

    Args:
        root: Project root directory.
        locale_dir: Trailing directory segments a locale file must live in.
        extensions: Recognized file extensions (case-insensitive).
        sort: Order results lexically by relative path. When False the
              filesystem traversal order is kept.

    Returns:
        List[LocaleFile]: Matches paired with their root-relative paths.
    """
    root_abs = os.path.abspath(root)
    if not os.path.isdir(root_abs):
        logger.debug(f"Project root '{root_abs}' does not exist; nothing to locate.")
        return []

    segments = locale_dir_segments(locale_dir)
    allowed = _normalize_extensions(extensions)

    found = list(_walk_locale_files(root_abs, segments, allowed))
    if sort:
        found.sort(key=lambda f: f.rel_path)

    if not found:
        logger.info(
            f"No locale files matching '{'/'.join(segments)}/*' "
            f"{'/'.join(allowed)} found under '{root_abs}'."
        )
    else:
        logger.debug(f"Located {len(found)} locale file(s) under '{root_abs}'.")
    return found


def is_locale_dir(rel_dir: str, segments: Tuple[str, ...]) -> bool:
    """
    Check whether a root-relative directory ends with the locale segments.

    Args:
        rel_dir: Directory path relative to the project root ('.' for root).
        segments: Expected trailing path segments.

    Returns:
        bool: True if the directory path ends with all segments.
    """
    if not segments:
        return True
    parts = tuple(p for p in rel_dir.replace("\\", "/").split("/") if p not in ("", "."))
    return len(parts) >= len(segments) and parts[-len(segments):] == segments


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _walk_locale_files(
        root_abs: str,
        segments: Tuple[str, ...],
        allowed: Tuple[str, ...],
) -> Iterable[LocaleFile]:
    for current, dirs, files in os.walk(root_abs):
        # Hidden directories and files are not part of the convention
        dirs[:] = [d for d in dirs if not d.startswith(".")]
        rel_dir = relative_posix_path(current, root_abs)
        if not is_locale_dir(rel_dir, segments):
            continue

        for file_name in files:
            if file_name.startswith("."):
                continue

            _, ext = os.path.splitext(file_name)
            if ext.lower() not in allowed:
                continue

            file_path = os.path.join(current, file_name)
            if not os.path.isfile(file_path):
                continue

            yield LocaleFile(
                path=file_path,
                rel_path=relative_posix_path(file_path, root_abs),
            )


def _normalize_extensions(extensions: Optional[Sequence[str]]) -> Tuple[str, ...]:
    raw = extensions if extensions else DEFAULT_EXTENSIONS
    out = []
    for ext in raw:
        e = ext.strip().lower()
        if not e:
            continue
        out.append(e if e.startswith(".") else f".{e}")
    return tuple(out)
