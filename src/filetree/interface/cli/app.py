from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates a single run: logging bootstrap, argument validation, tree
construction and emission of the JSON document on stdout. Diagnostics only
ever go to stderr.
"""

import sys
from typing import List, Optional

from filetree.core.serializer import serialize_tree
from filetree.core.tree_builder import TreeBuilder
from filetree.domain.tree_models import count_nodes
from filetree.infra.fs import path_exists
from filetree.infra.logging import LoggingConfig, configure_logging, get_logger
from filetree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Invocation validation
    if not args.directory:
        parser.print_usage(sys.stderr)
        print("ERROR: Missing required argument: directory", file=sys.stderr)
        return EXIT_ERROR

    root = args.directory
    if args.extra:
        logger.debug(f"Ignoring extra arguments: {args.extra}")
    if not path_exists(root):
        print(f"ERROR: Directory does not exist: {root}", file=sys.stderr)
        return EXIT_ERROR

    try:
        config = cli_args.args_to_config(args)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    # 4. Traversal phase
    logger.debug(f"Building tree for: {root}")
    builder = TreeBuilder(config)
    try:
        nodes = builder.build(root, 0)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    folders, files = count_nodes(nodes)
    logger.debug(
        f"Tree built: {folders} folders, {files} files, {len(builder.errors)} read errors"
    )

    # 5. Output phase (single write)
    sys.stdout.write(serialize_tree(nodes))
    sys.stdout.flush()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
