from __future__ import annotations

"""
Tree Renderer.

Walks a directory depth-first and streams one line per entry using
box-drawing connectors (├──, └──). Lines are emitted as soon as each entry
is reached, so a failure deep in the tree leaves the lines of earlier
siblings on screen and prints nothing after it.
"""

import logging
import os
from typing import Callable, Tuple

from treewalker.core.analysis.tree_walker import list_entries
from treewalker.domain.errors import InvalidPathError

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
BLANK = "    "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        path: str,
        prefix: str = "",
        ignore_hidden: bool = False,
        emit: Callable[[str], None] = print,
) -> None:
    """
    Recursively render the contents of a directory.

    Args:
        path: Directory whose contents are rendered.
        prefix: Accumulated continuation prefix of the ancestors.
        ignore_hidden: Skip entries whose name starts with a dot, at every depth.
        emit: Sink receiving each rendered line (stdout by default).

    Raises:
        InvalidPathError: If path is not an existing directory.
        TreeWalkError: If a directory cannot be enumerated.
    """
    if not os.path.isdir(path):
        raise InvalidPathError(path)

    logger.debug(f"Rendering directory: {path}")
    entries = list_entries(path, ignore_hidden=ignore_hidden)
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        branch_prefix, continuation_prefix = frame_prefixes(prefix, is_last)

        if entry.is_dir:
            emit(f"{branch_prefix}{entry.display_name}/")
            render_tree(
                entry.path,
                prefix=continuation_prefix,
                ignore_hidden=ignore_hidden,
                emit=emit,
            )
        else:
            emit(f"{branch_prefix}{entry.display_name}")


def frame_prefixes(prefix: str, is_last: bool) -> Tuple[str, str]:
    """
    Compute the (branch, continuation) prefixes for one entry.

    Args:
        prefix: Continuation prefix inherited from the parent.
        is_last: Whether the entry closes its sibling list.

    Returns:
        Tuple[str, str]: Prefix for the entry line and for its descendants.
    """
    if is_last:
        return prefix + LAST_BRANCH, prefix + BLANK
    return prefix + BRANCH, prefix + PIPE
