from __future__ import annotations

"""
Tree Document Serializer.

Renders the node forest as a single compact JSON array.
"""

import json
from typing import List

from filetree.domain.tree_models import Node, node_to_dict


def serialize_tree(nodes: List[Node]) -> str:
    """Dump nodes as compact JSON. Non-ASCII and undecodable names are escaped."""
    return json.dumps(
        [node_to_dict(n) for n in nodes],
        separators=(",", ":"),
    )
