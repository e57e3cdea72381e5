from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the tagged node variants produced by the tree builder. A folder
always carries its (possibly empty) children; a file never does.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

from filetree.domain.constants import FILE_TYPE, FOLDER_TYPE

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (any non-directory) in the directory tree.

    Attributes:
        name: Base name of the entry.
        path: Entry path, joined from the parent path as given.
        depth: Recursion depth at which the entry was discovered.
    """
    name: str
    path: str
    depth: int

    @property
    def type(self) -> str:
        return FILE_TYPE


@dataclass(frozen=True)
class FolderNode:
    """
    Represents a directory entry and its eligible descendants.

    Attributes:
        name: Base name of the directory.
        path: Directory path, joined from the parent path as given.
        depth: Recursion depth at which the directory was discovered.
        children: Child nodes in traversal order; empty at the depth cutoff.
    """
    name: str
    path: str
    depth: int
    children: Tuple[Node, ...] = field(default_factory=tuple)

    @property
    def type(self) -> str:
        return FOLDER_TYPE


Node = Union[FolderNode, FileNode]

# -----------------------------------------------------------------------------
# CONVERSION HELPERS
# -----------------------------------------------------------------------------

def node_to_dict(node: Node) -> Dict[str, Any]:
    """
    Convert a node into its output document shape.

    Keys follow the order name, path, depth, type and, for folders only,
    children.
    """
    data: Dict[str, Any] = {
        "name": node.name,
        "path": node.path,
        "depth": node.depth,
        "type": node.type,
    }
    if isinstance(node, FolderNode):
        data["children"] = [node_to_dict(child) for child in node.children]
    return data


def count_nodes(nodes: List[Node]) -> Tuple[int, int]:
    """Return the number of (folders, files) in a forest of nodes."""
    folders = 0
    files = 0
    for node in nodes:
        if isinstance(node, FolderNode):
            folders += 1
            sub_folders, sub_files = count_nodes(list(node.children))
            folders += sub_folders
            files += sub_files
        else:
            files += 1
    return folders, files
