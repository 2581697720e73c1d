from __future__ import annotations

"""
Rendering Error Taxonomy.

Closed set of failure kinds raised by the tree renderer. Each kind keeps
the originating OS error (when there is one) so the reporting boundary can
branch on the kind and still show the underlying cause.
"""


class TreeError(Exception):
    """Base class for every failure raised while rendering a tree."""


class InvalidPathError(TreeError):
    """The path does not refer to an existing directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a directory: {path}")
        self.path = path


class TreeReadError(TreeError):
    """
    Low-level OS failure while reading directory contents or metadata.

    Attributes:
        path: Path whose metadata could not be read.
        cause: The originating OS error.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(str(cause))
        self.path = path
        self.cause = cause


class TreeWalkError(TreeError):
    """
    Failure while enumerating the children of a directory.

    Attributes:
        path: Directory being listed.
        cause: The originating OS error.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(str(cause))
        self.path = path
        self.cause = cause
