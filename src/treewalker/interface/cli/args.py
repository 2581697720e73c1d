from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into the immutable TreeConfig consumed by the renderer.
"""

import argparse

from treewalker.domain.tree_models import TreeConfig

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treewalker CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treewalker",
        description="Print the contents of a directory as a tree.",
    )

    p.add_argument(
        "path",
        help="The path to the directory",
    )
    p.add_argument(
        "--ignore-hidden",
        dest="ignore_hidden",
        action="store_true",
        help="Ignore files and folders that start with a '.'",
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
        help="Also write diagnostic logs to this file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace) -> TreeConfig:
    """
    Translate the argparse Namespace into a TreeConfig.

    Args:
        args: Parsed command-line arguments.

    Returns:
        TreeConfig: The run configuration.
    """
    return TreeConfig(
        root_path=args.path,
        ignore_hidden=bool(args.ignore_hidden),
        debug=bool(args.debug),
        log_file=args.log_file,
    )
