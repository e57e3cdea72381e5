from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides shared directory trees used across unit and E2E tests.
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


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create the canonical sample project.

    Structure:
    /project
      a.txt
      /node_modules
        pkg.js
      /src
        b.txt
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.txt").write_text("a", encoding="utf-8")

    nm = root / "node_modules"
    nm.mkdir()
    (nm / "pkg.js").write_text("module.exports = {}", encoding="utf-8")

    src = root / "src"
    src.mkdir()
    (src / "b.txt").write_text("b", encoding="utf-8")

    return root


@pytest.fixture
def deep_chain(tmp_path: Path) -> Path:
    """
    Create a single chain of folders l0/l1/.../l7 with a file at the bottom.

    l0 is discovered at depth 0, so l5 sits exactly at the default depth
    limit and must be emitted with no children.
    """
    root = tmp_path / "deep"
    root.mkdir()
    current = root
    for i in range(8):
        current = current / f"l{i}"
        current.mkdir()
    (current / "bottom.txt").write_text("x", encoding="utf-8")
    return root
