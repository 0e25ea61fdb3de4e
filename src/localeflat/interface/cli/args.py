from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from localeflat.domain.constants import APP_NAME, APP_VERSION, DEFAULT_LOCALE_DIR

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the localeflat CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Collect locale YAML files under a project, flatten their nested "
            "keys and print one JSON document of language -> key -> translation."
        ),
    )

    p.add_argument(
        "input_path",
        nargs="?",
        default=None,
        metavar="ROOT",
        help="Project root to scan for locale files.",
    )

    # --- Output Variant ---
    variant = p.add_mutually_exclusive_group()
    variant.add_argument(
        "--with-file",
        dest="include_source_file",
        action="store_const",
        const=True,
        default=None,
        help="Record the contributing file next to each translation (default).",
    )
    variant.add_argument(
        "--simple",
        dest="include_source_file",
        action="store_const",
        const=False,
        help="Emit bare translation strings without the contributing file.",
    )

    # --- Discovery ---
    p.add_argument(
        "--locale-dir",
        dest="locale_dir",
        default=None,
        help=f"Trailing directory segments holding locale files (default: {DEFAULT_LOCALE_DIR}).",
    )
    p.add_argument(
        "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated locale file extensions (default: .yml,.yaml).",
    )
    p.add_argument(
        "--no-sort",
        action="store_true",
        help="Process files in filesystem order instead of sorted by path.",
    )

    # --- Output Destination ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Write the JSON document to this file instead of stdout.",
    )
    p.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Spaces per indentation level in the JSON output (default: 2).",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this (rotating) log file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Options left unset map to None so the merge keeps the defaults.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["output_path"] = args.output_path
    overrides["include_source_file"] = args.include_source_file
    overrides["locale_dir"] = args.locale_dir
    overrides["indent"] = args.indent

    if args.extensions:
        overrides["extensions"] = _split_csv(args.extensions)
    if args.no_sort:
        overrides["sort_files"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
