from __future__ import annotations

"""
Unit tests for the tree node models and traversal configuration.
"""

import dataclasses

import pytest

from filetree.domain.config import TreeConfig, build_config, get_default_config
from filetree.domain.constants import DEFAULT_IGNORE_NAMES, MAX_DEPTH
from filetree.domain.tree_models import FileNode, FolderNode, count_nodes, node_to_dict


def test_variant_type_tags() -> None:
    assert FileNode(name="f", path="f", depth=0).type == "file"
    assert FolderNode(name="d", path="d", depth=0).type == "folder"


def test_folder_children_default_to_empty() -> None:
    assert FolderNode(name="d", path="d", depth=3).children == ()


def test_nodes_are_immutable() -> None:
    node = FileNode(name="f", path="f", depth=0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.depth = 1  # type: ignore[misc]


def test_file_dict_has_no_children_key() -> None:
    assert node_to_dict(FileNode(name="f", path="p/f", depth=2)) == {
        "name": "f", "path": "p/f", "depth": 2, "type": "file",
    }


def test_count_nodes() -> None:
    tree = [
        FileNode(name="a", path="a", depth=0),
        FolderNode(
            name="d",
            path="d",
            depth=0,
            children=(
                FileNode(name="b", path="d/b", depth=1),
                FolderNode(name="e", path="d/e", depth=1),
            ),
        ),
    ]
    assert count_nodes(tree) == (2, 2)


def test_default_config() -> None:
    cfg = get_default_config()
    assert cfg.max_depth == MAX_DEPTH == 5
    assert cfg.ignore_names == DEFAULT_IGNORE_NAMES
    assert cfg.sort_entries is False


def test_default_ignore_names() -> None:
    assert DEFAULT_IGNORE_NAMES == {
        "node_modules", ".git", "dist", "build", ".next", "coverage", ".cache",
    }


def test_build_config_merges_extra_ignores() -> None:
    cfg = build_config(extra_ignores=["venv", " tmp ", ""])
    assert {"venv", "tmp"} <= cfg.ignore_names
    assert DEFAULT_IGNORE_NAMES <= cfg.ignore_names
    assert "" not in cfg.ignore_names


def test_build_config_without_defaults() -> None:
    cfg = build_config(extra_ignores=["venv"], use_default_ignores=False)
    assert cfg.ignore_names == frozenset({"venv"})


def test_build_config_rejects_negative_depth() -> None:
    with pytest.raises(ValueError):
        build_config(max_depth=-1)


def test_build_config_defaults_match_tree_config() -> None:
    assert build_config() == TreeConfig()


def test_build_config_ignore_suffixes() -> None:
    cfg = build_config(ignore_suffixes=[".test.js", " .spec.js ", ""])
    assert cfg.ignore_suffixes == frozenset({".test.js", ".spec.js"})
    assert get_default_config().ignore_suffixes == frozenset()
