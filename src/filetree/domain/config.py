from __future__ import annotations

"""
Traversal Configuration Domain.

Defines the immutable configuration injected into the tree builder and the
helpers that derive it from command-line overrides.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from filetree.domain.constants import DEFAULT_IGNORE_NAMES, MAX_DEPTH

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeConfig:
    """
    Immutable settings for a single traversal.

    Attributes:
        max_depth: Deepest depth whose folders are still expanded.
        ignore_names: Entry names skipped together with their subtree.
        ignore_suffixes: Name endings skipped together with their subtree.
        sort_entries: Order entries by name instead of listing order.
    """
    max_depth: int = MAX_DEPTH
    ignore_names: FrozenSet[str] = DEFAULT_IGNORE_NAMES
    ignore_suffixes: FrozenSet[str] = frozenset()
    sort_entries: bool = False


def get_default_config() -> TreeConfig:
    """Return the configuration used when no overrides are supplied."""
    return TreeConfig()


def build_config(
        max_depth: Optional[int] = None,
        extra_ignores: Optional[Iterable[str]] = None,
        use_default_ignores: bool = True,
        sort_entries: bool = False,
        ignore_suffixes: Optional[Iterable[str]] = None,
) -> TreeConfig:
    """
    Derive a TreeConfig from optional overrides.

    Args:
        max_depth: Depth limit override. None keeps the default.
        extra_ignores: Additional names merged into the ignore set.
        use_default_ignores: Start from the default ignore set when True.
        sort_entries: Enable deterministic name ordering.
        ignore_suffixes: Name endings (e.g. ".test.js") to skip.

    Returns:
        TreeConfig: The validated configuration.

    Raises:
        ValueError: If max_depth is negative.
    """
    depth = MAX_DEPTH if max_depth is None else int(max_depth)
    if depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {depth}")

    names = set(DEFAULT_IGNORE_NAMES) if use_default_ignores else set()
    if extra_ignores:
        names.update(n.strip() for n in extra_ignores if n and n.strip())

    suffixes = frozenset(s.strip() for s in (ignore_suffixes or []) if s and s.strip())

    cfg = TreeConfig(
        max_depth=depth,
        ignore_names=frozenset(names),
        ignore_suffixes=suffixes,
        sort_entries=bool(sort_entries),
    )
    logger.debug(f"Resolved traversal config: {cfg}")
    return cfg
