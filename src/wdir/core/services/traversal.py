from __future__ import annotations

"""
Directory Traversal Engine.

Matches a glob pattern inside a root directory and, depth budget permitting,
inside every eligible subdirectory below it. Emits one MatchedEntry per
matched file or directory and folds them into AggregateStats.

Recursion is driven by an explicit work-list so that pathological trees do
not grow the interpreter stack. Recoverable failures (bad pattern, vanished
entry, unreadable subdirectory) shrink the result instead of aborting it.
"""

import glob
import logging
import os
import re
import stat
from typing import Iterable, Iterator, List, Optional, Tuple

from wdir.core.services.patterns import join_pattern
from wdir.domain.errors import TraversalError
from wdir.domain.traversal_models import (
    AggregateStats,
    EntryKind,
    MatchedEntry,
    TraversalRequest,
)
from wdir.infra.fs import is_hidden_name, is_readable_dir

logger = logging.getLogger(__name__)

# Not entries of the directory being listed, even when a literal pattern names them.
_SELF_REFERENCES = frozenset({"", os.curdir, os.pardir})


# ==============================================================================
# PUBLIC API
# ==============================================================================

def validate_root(path: str) -> str:
    """
    Check the traversal precondition on the root directory.

    Args:
        path: Root directory as supplied by the caller.

    Returns:
        str: The path, unchanged.

    Raises:
        TraversalError: If the path is missing, not a directory, or cannot be listed.
    """
    if not os.path.exists(path):
        raise TraversalError(path, "directory does not exist")
    if not is_readable_dir(path):
        raise TraversalError(path, "not a readable directory")
    return path


def traverse(request: TraversalRequest) -> Tuple[List[MatchedEntry], AggregateStats]:
    """
    Run a complete traversal and return its entries with their totals.

    Args:
        request: Traversal parameters.

    Returns:
        Tuple[List[MatchedEntry], AggregateStats]: Entries in emission order
        and the statistics folded over them.

    Raises:
        TraversalError: If the root fails validation.
    """
    validate_root(request.root)
    entries = list(iter_matches(request))
    return entries, summarize(entries)


def iter_matches(request: TraversalRequest) -> Iterator[MatchedEntry]:
    """
    Lazily yield matched entries, depth-first.

    Each directory's own matches are yielded before any of its subtrees;
    subtrees follow in sorted listing order. The root is not validated here,
    call validate_root() first when a hard failure is wanted.

    Args:
        request: Traversal parameters.

    Yields:
        MatchedEntry: One per matched file or directory.
    """
    logger.debug(
        f"Traversal of '{request.root}' with pattern '{request.pattern}' "
        f"(depth={'unbounded' if request.unbounded else request.max_depth}, "
        f"hidden={request.include_hidden}, dirs_only={request.directories_only})"
    )

    pending: List[Tuple[str, int]] = [(request.root, request.max_depth)]

    while pending:
        current, depth = pending.pop()

        for path in _glob_level(current, request.pattern):
            entry = _classify(path, request)
            if entry is not None:
                yield entry

        if depth > 0:
            children = _list_subdirectories(current, request.include_hidden)
            # Reversed so the first child is popped first.
            pending.extend((child, depth - 1) for child in reversed(children))


def summarize(entries: Iterable[MatchedEntry]) -> AggregateStats:
    """Fold a sequence of entries into aggregate statistics."""
    stats = AggregateStats()
    for entry in entries:
        stats.record(entry)
    return stats


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _glob_level(directory: str, pattern: str) -> List[str]:
    """Return sorted pattern matches directly inside one directory."""
    if not pattern:
        return []
    try:
        return sorted(glob.glob(join_pattern(directory, pattern), include_hidden=True))
    except (OSError, ValueError, re.error) as e:
        logger.debug(f"Pattern '{pattern}' unusable in '{directory}': {e}")
        return []


def _classify(path: str, request: TraversalRequest) -> Optional[MatchedEntry]:
    """
    Turn a glob match into a MatchedEntry, or None when it must be skipped.
    """
    name = os.path.basename(path.rstrip(os.sep + (os.altsep or "")))
    if name in _SELF_REFERENCES:
        return None
    if not request.include_hidden and is_hidden_name(name):
        return None

    try:
        st = os.stat(path)
        canonical = os.path.realpath(path, strict=True)
    except OSError as e:
        logger.debug(f"Skipping '{path}': {e}")
        return None

    if stat.S_ISDIR(st.st_mode):
        return MatchedEntry(absolute_path=canonical, kind=EntryKind.DIRECTORY)

    if stat.S_ISREG(st.st_mode) and not request.directories_only:
        return MatchedEntry(
            absolute_path=canonical,
            kind=EntryKind.FILE,
            size_bytes=st.st_size,
        )

    return None


def _list_subdirectories(directory: str, include_hidden: bool) -> List[str]:
    """
    List the subdirectories eligible for descent, in sorted order.

    Symlinked directories are never eligible. An unreadable directory
    contributes no children.
    """
    try:
        with os.scandir(directory) as it:
            children = [
                entry.path for entry in it
                if (include_hidden or not is_hidden_name(entry.name)) and _is_real_dir(entry)
            ]
    except OSError as e:
        logger.debug(f"Cannot list '{directory}': {e}")
        return []

    return sorted(children)


def _is_real_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False
