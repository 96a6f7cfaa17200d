from __future__ import annotations

"""
File Pattern Interpretation.

Splits the raw positional pattern into the glob that is actually matched and
the directories-only flag, and builds per-directory glob expressions.
"""

import glob
import os
from dataclasses import dataclass

DEFAULT_PATTERN = "*"
DIRECTORIES_ONLY_MARKER = "."


@dataclass(frozen=True)
class ParsedPattern:
    glob: str
    directories_only: bool


def parse_pattern(raw: str) -> ParsedPattern:
    """
    Interpret a user-supplied file pattern.

    A trailing '.' (as in '*.') selects directories only; the marker is
    stripped and the remainder is still applied to directory names.

    Args:
        raw: Pattern as typed on the command line.

    Returns:
        ParsedPattern: Glob to match and the directories-only flag.
    """
    if raw.endswith(DIRECTORIES_ONLY_MARKER):
        return ParsedPattern(glob=raw[:-1], directories_only=True)
    return ParsedPattern(glob=raw, directories_only=False)


def join_pattern(directory: str, pattern: str) -> str:
    """
    Anchor a glob pattern inside a directory.

    The directory part is escaped so that names such as 'data[1]' are taken
    literally; only the pattern part carries wildcards.
    """
    return os.path.join(glob.escape(directory), pattern)
