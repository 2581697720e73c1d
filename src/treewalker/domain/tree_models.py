from __future__ import annotations

"""
Directory Tree Data Models.

Provides the immutable value objects threaded through a rendering run:
the CLI configuration and the entries discovered while listing a directory.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# RUN CONFIGURATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeConfig:
    """
    Immutable configuration for a single rendering run.

    Attributes:
        root_path: Directory to render, kept exactly as given by the user.
        ignore_hidden: Skip entries whose name starts with a dot.
        debug: Elevate logging verbosity to DEBUG.
        log_file: Optional path for persistent diagnostic logs.
    """
    root_path: str
    ignore_hidden: bool = False
    debug: bool = False
    log_file: Optional[str] = None

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeEntry:
    """
    A single child discovered while listing one directory.

    Attributes:
        path: Filesystem path of the entry (parent joined with name).
        name: Final path component as returned by the OS.
        is_dir: True if the entry resolves to a directory.
    """
    path: str
    name: str
    is_dir: bool

    @property
    def display_name(self) -> str:
        """Name decoded for terminal output, undecodable bytes replaced."""
        return os.fsencode(self.name).decode("utf-8", errors="replace")

    @property
    def sort_key(self) -> Tuple[bool, bytes]:
        return (not self.is_dir, os.fsencode(self.name))
