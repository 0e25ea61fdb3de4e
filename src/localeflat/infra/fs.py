from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, relative path rendering and output writing.
Keeps relative paths in POSIX form so generated documents are identical
across Windows and Unix-like systems.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def relative_posix_path(path: str, start: str) -> str:
    """
    Express a path relative to a base directory using '/' separators.

    Args:
        path: Absolute path of the target.
        start: Absolute path of the base directory.

    Returns:
        str: Relative path with forward slashes.
    """
    return os.path.relpath(path, start).replace(os.sep, "/")

# -----------------------------------------------------------------------------
# OUTPUT API
# -----------------------------------------------------------------------------

def write_text_file(path: str, content: str) -> str:
    """
    Persist a text document, creating the parent hierarchy when missing.

    Args:
        path: Target file path.
        content: Text to write (UTF-8).

    Returns:
        str: Absolute path of the written file.
    """
    target = os.path.abspath(path)
    parent = os.path.dirname(target)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(target, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
        if not content.endswith("\n"):
            f.write("\n")
    return target
