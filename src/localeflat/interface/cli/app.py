from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults plus command-line overrides), pipeline execution and output.
stdout only ever carries the JSON document; diagnostics go to stderr.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from localeflat.core.engine import run_pipeline
from localeflat.core.validator import validate_config
from localeflat.domain.config import get_default_config
from localeflat.domain.errors import LocaleParseError, UsageError
from localeflat.infra.logging import LoggingConfig, configure_logging, get_logger
from localeflat.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 usage error).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(
        LoggingConfig(level=log_level, console=True, log_file=args.log_file),
        force=True,
    )

    # 3. Configuration resolution
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Required argument check
    try:
        _require_root(args.input_path)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    # 5. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf)
    except LocaleParseError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except OSError as e:
        print(f"ERROR: I/O failure: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except Exception as e:
        logger.critical(f"Flattening failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Output phase
    if not result.output_path:
        print(result.output)

    logger.debug(
        f"Done: {len(result.files)} file(s), {len(result.languages)} language(s), "
        f"{result.key_count} key(s)."
    )
    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _require_root(input_path: Optional[str]) -> None:
    if not input_path or not input_path.strip():
        raise UsageError("the following arguments are required: ROOT")


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known override values into the base configuration.

    None values mean "not given on the command line" and are skipped.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    sys.exit(main())
