from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed namespaces into the
traversal configuration consumed by the tree builder.
"""

import argparse
from typing import List, Optional

from filetree.domain.config import TreeConfig, build_config
from filetree.domain.constants import DEFAULT_IGNORE_NAMES, MAX_DEPTH

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the filetree CLI.

    The directory is optional at the parser level; the application reports a
    missing value itself so that it exits with status 1.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="filetree",
        description="Print a directory's contents as a nested JSON tree.",
    )

    p.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Root directory to enumerate. The root itself is not emitted.",
    )
    # Trailing positionals are accepted and ignored
    p.add_argument("extra", nargs="*", help=argparse.SUPPRESS)

    # --- Traversal Limits ---
    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help=f"Deepest level whose folders list their children (default: {MAX_DEPTH}).",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_names",
        default=None,
        help="Comma-separated entry names to skip in addition to the defaults.",
    )
    p.add_argument(
        "--exclude-suffix",
        dest="exclude_suffixes",
        default=None,
        help="Comma-separated name endings to skip (e.g. .test.js,.spec.js).",
    )
    p.add_argument(
        "--no-default-ignores",
        action="store_true",
        help=f"Do not skip the default names ({', '.join(sorted(DEFAULT_IGNORE_NAMES))}).",
    )
    p.add_argument(
        "--sort",
        action="store_true",
        help="Order entries by name instead of filesystem listing order.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace) -> TreeConfig:
    """
    Translate the argparse Namespace into a TreeConfig.

    Raises:
        ValueError: If the requested depth limit is negative.
    """
    return build_config(
        max_depth=args.max_depth,
        extra_ignores=_split_csv(args.exclude_names),
        use_default_ignores=not args.no_default_ignores,
        sort_entries=args.sort,
        ignore_suffixes=_split_csv(args.exclude_suffixes),
    )


def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of non-empty items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
