from __future__ import annotations

"""
Run Configuration Defaults.

The tool is stateless: configuration is a plain dictionary assembled from
these defaults and command-line overrides, resolved once at startup.
"""

import os
from typing import Any, Dict

from localeflat.domain.constants import (
    DEFAULT_EXTENSIONS,
    DEFAULT_INDENT,
    DEFAULT_LOCALE_DIR,
)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": os.getcwd(),
        "output_path": "",

        # Discovery
        "locale_dir": DEFAULT_LOCALE_DIR,
        "extensions": list(DEFAULT_EXTENSIONS),
        "sort_files": True,

        # Output Format
        "include_source_file": True,
        "indent": DEFAULT_INDENT,
    }
