from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution and directory validation utilities.
Acts as an abstraction over the 'os' module to ensure uniform behavior across
Windows and Unix-like systems.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "wdir"
UNIX_APP_DIR_NAME = ".wdir"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for user settings.

    The directory is not created; wdir only ever reads from it.
    Standards:
    - Windows: %LOCALAPPDATA%/wdir
    - Linux/Mac: ~/.wdir

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def is_readable_dir(path: str) -> bool:
    """
    Check that a path is a directory whose listing can actually be opened.
    """
    if not os.path.isdir(path):
        return False
    try:
        with os.scandir(path):
            pass
    except OSError:
        return False
    return True


def is_hidden_name(name: str) -> bool:
    """Unix convention: a leading dot marks an entry as hidden."""
    return name.startswith(".")
