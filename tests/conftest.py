from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared directory-tree fixtures used across unit and e2e tests.
3. Isolation of the logging subsystem and user config between tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from wdir.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch):
    """Point the user config lookup at an empty home and reset logging afterwards."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home))
    yield
    shutdown_logging()


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def scenario_tree(tmp_path: Path) -> Path:
    """
    Create the reference directory tree.

    Structure:
    /root
      a.txt      (10 bytes)
      b.txt      (20 bytes)
      .c.txt     (5 bytes, hidden)
      /sub
        d.txt    (3 bytes)
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_bytes(b"x" * 10)
    (root / "b.txt").write_bytes(b"x" * 20)
    (root / ".c.txt").write_bytes(b"x" * 5)

    sub = root / "sub"
    sub.mkdir()
    (sub / "d.txt").write_bytes(b"x" * 3)

    return root


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """
    Create a three-level tree with hidden directories.

    Structure:
    /deep
      top.log            (1 byte)
      /alpha
        a1.log           (2 bytes)
        /beta
          b1.log         (4 bytes)
          /gamma
            g1.log       (8 bytes)
      /.hidden
        h1.log           (16 bytes)
      /zeta
        z1.txt           (32 bytes)
    """
    root = tmp_path / "deep"
    (root / "alpha" / "beta" / "gamma").mkdir(parents=True)
    (root / ".hidden").mkdir()
    (root / "zeta").mkdir()

    (root / "top.log").write_bytes(b"x")
    (root / "alpha" / "a1.log").write_bytes(b"x" * 2)
    (root / "alpha" / "beta" / "b1.log").write_bytes(b"x" * 4)
    (root / "alpha" / "beta" / "gamma" / "g1.log").write_bytes(b"x" * 8)
    (root / ".hidden" / "h1.log").write_bytes(b"x" * 16)
    (root / "zeta" / "z1.txt").write_bytes(b"x" * 32)

    return root


@pytest.fixture
def make_symlink():
    """Return a helper creating a directory symlink, skipping where unsupported."""
    def _make(target: Path, link: Path) -> Path:
        try:
            link.symlink_to(target, target_is_directory=True)
        except (OSError, NotImplementedError) as e:
            pytest.skip(f"symlinks unavailable: {e}")
        return link
    return _make


@pytest.hookimpl(tryfirst=True)
def pytest_sessionfinish(session, exitstatus):
    """Let pytest's temp-dir cleanup (recursive rmtree on Python < 3.12) remove
    the >1000-level tree built by test_tree_deeper_than_recursion_limit.
    Runs after all tests, so the tests themselves keep the default limit."""
    sys.setrecursionlimit(max(sys.getrecursionlimit(), 10000))
