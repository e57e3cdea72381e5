from __future__ import annotations

"""
Domain Constants.

Centralizes the traversal limits and the historical ignore list that the
tree builder falls back to when no explicit configuration is injected.
"""

from typing import FrozenSet

# Deepest recursion level whose folders still list their children
MAX_DEPTH: int = 5

DEFAULT_IGNORE_NAMES: FrozenSet[str] = frozenset({
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    "coverage",
    ".cache",
})

FOLDER_TYPE = "folder"
FILE_TYPE = "file"
