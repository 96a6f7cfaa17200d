from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration resolution (defaults, user file, CLI overrides), root
validation, traversal and result rendering.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from wdir.core.services.traversal import iter_matches, validate_root
from wdir.core.services.validator import to_request, validate_config
from wdir.domain.config import get_config_path, get_default_config, load_config
from wdir.domain.errors import TraversalError
from wdir.domain.traversal_models import AggregateStats, TraversalRequest
from wdir.infra.logging import LoggingConfig, configure_logging, get_logger
from wdir.interface.cli import args as cli_args
from wdir.interface.cli.manpage import render_manpage
from wdir.interface.cli.render import format_entry, format_summary

logger = get_logger(__name__)

_MERGEABLE_KEYS = ["directory", "pattern", "recursive", "depth", "all", "bare", "quiet", "raw"]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Invalid arguments, including an unusable root directory, exit through
    argparse with status 2.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.mangen:
        sys.stdout.write(render_manpage(parser))
        return 0

    # 2. Logging bootstrap (stderr only, stdout carries the listing)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Resolve configuration
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    if args.recursive and args.depth is None:
        # -s on the command line outranks a stored depth; only -d beats it.
        raw_conf["depth"] = None
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight root verification
    request = to_request(clean_conf)
    try:
        validate_root(request.root)
    except TraversalError as e:
        parser.error(_root_error_message(args, base_conf, clean_conf["directory"], e.reason))

    if clean_conf["quiet"] and clean_conf["bare"]:
        return 0

    # 5. Traversal and streaming output
    try:
        stats = _run_listing(request, quiet=clean_conf["quiet"], raw=clean_conf["raw"])
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except Exception as e:
        logger.critical(f"Listing failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if not clean_conf["bare"]:
        print(format_summary(stats))

    return 0

# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def _run_listing(request: TraversalRequest, *, quiet: bool, raw: bool) -> AggregateStats:
    """Print every matched entry as it is found and return the totals."""
    stats = AggregateStats()
    for entry in iter_matches(request):
        stats.record(entry)
        if not quiet:
            print(format_entry(entry, raw=raw))
    logger.debug(
        f"Listed {stats.file_count} file(s), {stats.directory_count} dir(s), "
        f"{stats.total_bytes} bytes"
    )
    return stats


def _root_error_message(
        args: argparse.Namespace,
        base_conf: Dict[str, Any],
        directory: str,
        reason: str,
) -> str:
    """Name where the unusable root came from: -C or the user config file."""
    from_file = (
        args.directory is None
        and not args.use_defaults
        and base_conf["directory"] != get_default_config()["directory"]
    )
    if from_file:
        return f"directory from config file '{get_config_path()}': {reason}: '{directory}'"
    return f"argument -C/--directory: {reason}: '{directory}'"

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only known keys are merged, and None means "not given on the command line".

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in _MERGEABLE_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
