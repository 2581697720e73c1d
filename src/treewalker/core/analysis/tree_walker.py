from __future__ import annotations

"""
Directory Entry Lister.

Reads exactly one level of a directory, classifies each child by querying
the filesystem (following symbolic links) and returns the children in
rendering order: directories first, then files, each group by byte order.
"""

import logging
import os
import stat
from typing import List

from treewalker.domain.errors import TreeWalkError
from treewalker.domain.tree_models import TreeEntry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_hidden(name: str) -> bool:
    """Return True for names starting with a dot."""
    return name.startswith(".")


def is_directory(path: str) -> bool:
    """
    Classify a path by the type of its (link-resolved) target.

    Entries whose type cannot be determined (broken or looping links,
    permission or device errors on the lookup) count as files.

    Args:
        path: Filesystem path to inspect.

    Returns:
        bool: True if the path resolves to a directory.
    """
    try:
        st = os.stat(path)
    except OSError as e:
        logger.debug(f"Type of entry unknown, treated as file: {path} ({e})")
        return False
    return stat.S_ISDIR(st.st_mode)


def list_entries(path: str, ignore_hidden: bool = False) -> List[TreeEntry]:
    """
    List the immediate children of a directory in rendering order.

    Hidden names are dropped while enumerating, before any sorting, so they
    never take part in ordering or in the "last sibling" decision.

    Args:
        path: Directory to list.
        ignore_hidden: Skip names starting with a dot.

    Returns:
        List[TreeEntry]: Directories first, then files, byte-ordered by name.

    Raises:
        TreeWalkError: If the directory cannot be opened or iterated.
    """
    names: List[str] = []
    try:
        with os.scandir(path) as it:
            for dir_entry in it:
                if ignore_hidden and is_hidden(dir_entry.name):
                    continue
                names.append(dir_entry.name)
    except OSError as e:
        raise TreeWalkError(path, e) from e

    entries = []
    for name in names:
        child_path = os.path.join(path, name)
        entries.append(TreeEntry(path=child_path, name=name, is_dir=is_directory(child_path)))

    entries.sort(key=lambda entry: entry.sort_key)
    logger.debug(f"Listed {len(entries)} entries in: {path}")
    return entries
