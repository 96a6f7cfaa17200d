from __future__ import annotations

"""
Traversal Data Models.

Defines the immutable request that drives one directory traversal, the
entries it emits and the aggregate statistics folded over those entries.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# -----------------------------------------------------------------------------
# CONSTANTS
# -----------------------------------------------------------------------------

# Depth sentinel for unbounded recursion. Decremented per level like any other
# budget, but never exhausted by a real directory tree.
UNBOUNDED_DEPTH: int = sys.maxsize


# -----------------------------------------------------------------------------
# REQUEST
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TraversalRequest:
    """
    Parameters of a single traversal.

    Attributes:
        root: Directory the traversal starts from.
        pattern: Glob pattern applied inside every visited directory.
        directories_only: Suppress plain-file matches.
        include_hidden: Include entries whose name starts with '.'.
        max_depth: Extra directory levels to descend (0 = root only).
    """
    root: str
    pattern: str = "*"
    directories_only: bool = False
    include_hidden: bool = False
    max_depth: int = 0

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

    @property
    def unbounded(self) -> bool:
        return self.max_depth >= UNBOUNDED_DEPTH


# -----------------------------------------------------------------------------
# RESULTS
# -----------------------------------------------------------------------------

class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class MatchedEntry:
    """
    A filesystem object matched by the traversal.

    Attributes:
        absolute_path: Canonical absolute path (symlinks resolved).
        kind: FILE or DIRECTORY.
        size_bytes: Size reported by the filesystem; only set for files.
    """
    absolute_path: str
    kind: EntryKind
    size_bytes: Optional[int] = None

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass
class AggregateStats:
    """Running totals over every entry emitted by a traversal."""
    file_count: int = 0
    total_bytes: int = 0
    directory_count: int = 0

    def record(self, entry: MatchedEntry) -> None:
        """Fold one entry into the totals."""
        if entry.is_file:
            self.file_count += 1
            self.total_bytes += entry.size_bytes or 0
        elif entry.is_dir:
            self.directory_count += 1
