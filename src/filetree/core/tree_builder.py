from __future__ import annotations

"""
Directory Tree Builder.

Performs a depth-bounded recursive descent over a directory and produces the
tagged node tree. Unreadable directories are logged and contribute whatever
entries were read before the failure; traversal continues elsewhere.
"""

import logging
from typing import Callable, List, Optional

from filetree.domain.config import TreeConfig, get_default_config
from filetree.domain.tree_models import FileNode, FolderNode, Node
from filetree.infra.fs import DirectoryListing, ReadError, list_directory, path_exists

logger = logging.getLogger(__name__)

ListingFunc = Callable[[str], DirectoryListing]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class TreeBuilder:
    """
    Builds the node tree below a root path.

    The listing primitive is injectable so that failure paths can be
    exercised without touching real permissions.
    """

    def __init__(
            self,
            config: Optional[TreeConfig] = None,
            lister: ListingFunc = list_directory,
    ) -> None:
        self.config = config or get_default_config()
        self._list = lister
        self.errors: List[ReadError] = []

    def build(self, path: str, depth: int = 0) -> List[Node]:
        """
        Return the nodes for the direct entries of path and their subtrees.

        Args:
            path: Directory to enumerate.
            depth: Depth assigned to the entries found under path.

        Returns:
            List[Node]: Eligible entries in listing order, empty past the
            depth limit or when path does not exist.
        """
        if depth > self.config.max_depth or not path_exists(path):
            return []

        listing = self._list(path)
        if not listing.ok:
            self._record_error(listing.error)

        entries = listing.entries
        if self.config.sort_entries:
            entries = sorted(entries, key=lambda e: e.name)

        nodes: List[Node] = []
        for entry in entries:
            if self._is_ignored(entry.name):
                continue

            if entry.is_dir:
                children = self.build(entry.path, depth + 1)
                nodes.append(
                    FolderNode(name=entry.name, path=entry.path, depth=depth, children=tuple(children))
                )
            else:
                nodes.append(FileNode(name=entry.name, path=entry.path, depth=depth))

        return nodes

    def _is_ignored(self, name: str) -> bool:
        if name in self.config.ignore_names:
            return True
        return any(name.endswith(s) for s in self.config.ignore_suffixes)

    def _record_error(self, error: Optional[ReadError]) -> None:
        if error is None:
            return
        self.errors.append(error)
        logger.error(f"Error reading directory '{error.path}': {error.error}")


def build_tree(path: str, config: Optional[TreeConfig] = None) -> List[Node]:
    """Convenience wrapper: build the tree below path starting at depth 0."""
    return TreeBuilder(config).build(path, 0)
