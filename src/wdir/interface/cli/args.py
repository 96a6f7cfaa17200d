from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages, argument
types and defaults. Provides logic to translate raw argparse namespaces into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from wdir import __version__

PROG = "wdir"
DESCRIPTION = "A program to mimic the 'dir' Windows command."

# -----------------------------------------------------------------------------
# ARGUMENT TYPES
# -----------------------------------------------------------------------------

def non_negative_int(value: str) -> int:
    """argparse type for depth values."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: '{value}'") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"depth must be non-negative: '{value}'")
    return n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the wdir CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(prog=PROG, description=DESCRIPTION)

    # --- Target Selection ---
    p.add_argument(
        "pattern",
        nargs="?",
        default=None,
        help="Optional file pattern, may include '/'. "
             "A trailing '.' lists directories only (default: '*').",
    )
    p.add_argument(
        "-C", "--directory",
        dest="directory",
        default=None,
        metavar="PATH",
        help="Specify the path from which the command gets executed (default: '.').",
    )

    # --- Recursion ---
    p.add_argument(
        "-s", "--recursive",
        action="store_true",
        help="Descend into subdirectories without a depth limit.",
    )
    p.add_argument(
        "-d", "--depth",
        type=non_negative_int,
        default=None,
        metavar="N",
        help="Descend at most N levels below the starting directory (0: no recursion).",
    )

    # --- Selection and Presentation ---
    p.add_argument(
        "-a", "--all",
        action="store_true",
        help="Display all files and directories, even ones starting with '.'.",
    )
    p.add_argument(
        "-b", "--bare",
        action="store_true",
        help="Strip the trailing summary from the output.",
    )
    p.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="'Quiet' mode that only prints the summary.",
    )
    p.add_argument(
        "-r", "--raw",
        action="store_true",
        help="No color output.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the user configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
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
        metavar="PATH",
        help="Also write diagnostics to a rotating log file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "--mangen",
        action="store_true",
        help=argparse.SUPPRESS,
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Positional and valued options are passed through (None means "not
    given"); boolean flags only ever switch a setting on.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "pattern": args.pattern,
        "directory": args.directory,
        "depth": args.depth,
    }

    for flag in ("recursive", "all", "bare", "quiet", "raw"):
        if getattr(args, flag):
            overrides[flag] = True

    return overrides
