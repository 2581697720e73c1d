from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates a run: argument parsing, logging bootstrap, a single call to
the tree renderer and translation of the failure kind into one diagnostic
line on stderr.
"""

import sys
from typing import List, Optional

from treewalker.core.analysis.tree_renderer import render_tree
from treewalker.domain.errors import TreeError, TreeReadError, TreeWalkError
from treewalker.infra.logging import LoggingConfig, configure_logging, get_logger
from treewalker.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 render failure, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing (exits with status 2 on usage errors)
    parser = cli_args.build_parser()
    config = cli_args.args_to_config(parser.parse_args(argv))

    # 2. Logging bootstrap
    log_level = "DEBUG" if config.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=config.log_file))

    logger.debug(f"Rendering tree for: {config.root_path} (ignore_hidden={config.ignore_hidden})")

    # 3. Rendering
    try:
        render_tree(config.root_path, prefix="", ignore_hidden=config.ignore_hidden)
    except TreeError as e:
        logger.debug("Rendering aborted.", exc_info=True)
        print(format_error(e, config.root_path), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    return 0

# -----------------------------------------------------------------------------
# ERROR REPORTING
# -----------------------------------------------------------------------------

def format_error(error: TreeError, root_path: str) -> str:
    """
    Map a rendering failure to its diagnostic line.

    Args:
        error: The failure raised by the renderer.
        root_path: The path argument exactly as given by the user.

    Returns:
        str: One line identifying the failure class and its cause.
    """
    if isinstance(error, TreeReadError):
        return f"Error reading the directory: {error.cause}"
    if isinstance(error, TreeWalkError):
        return f"Error walking the directory: {error.cause}"
    # InvalidPathError
    return f"Invalid directory path: {root_path}"

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
