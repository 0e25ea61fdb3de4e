from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without
   being installed.
2. Provides helpers that lay out throwaway projects with locale files.
"""

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """
    Return a helper that writes UTF-8 text under tmp_path.

    Parent directories are created as needed; the relative path uses '/'.
    """
    def _write(rel_path: str, content: str) -> Path:
        target = tmp_path.joinpath(*rel_path.split("/"))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    return _write


@pytest.fixture
def sample_project(tmp_path: Path, write_file: Callable[[str, str], Path]) -> Path:
    """
    Create a small project with English and German locale files.

    Structure:
    /config/locales/en.yml   en.greeting.hello: Hello
    /config/locales/de.yml   de.greeting.hello: Hallo
    /app/views/index.yml     (ignored: not in a locale directory)
    """
    write_file("config/locales/en.yml", "en:\n  greeting:\n    hello: Hello\n")
    write_file("config/locales/de.yml", "de:\n  greeting:\n    hello: Hallo\n")
    write_file("app/views/index.yml", "en:\n  ignored: true\n")
    return tmp_path


@pytest.fixture(autouse=True)
def reset_logging():
    """Release any handlers installed by the CLI so streams are not reused across tests."""
    from localeflat.infra.logging import shutdown_logging

    yield
    shutdown_logging()
