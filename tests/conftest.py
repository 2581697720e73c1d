from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides a sample directory tree shared by renderer and CLI tests.
3. Resets the logging subsystem around every test.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treewalker.infra.logging import reset_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def clean_logging():
    """Detach treewalker handlers before and after each test."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small project tree.

    Structure:
    /project
      .git/
        HEAD
      docs/
        guide.md
      src/
        .cache/
          blob
        app/
          main.py
        util.py
      .env
      README.md
      setup.py
    """
    root = tmp_path / "project"
    root.mkdir()

    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main", encoding="utf-8")

    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("# Guide", encoding="utf-8")

    (root / "src").mkdir()
    (root / "src" / ".cache").mkdir()
    (root / "src" / ".cache" / "blob").write_text("x", encoding="utf-8")
    (root / "src" / "app").mkdir()
    (root / "src" / "app" / "main.py").write_text("print('hi')", encoding="utf-8")
    (root / "src" / "util.py").write_text("", encoding="utf-8")

    (root / ".env").write_text("SECRET=1", encoding="utf-8")
    (root / "README.md").write_text("# Project", encoding="utf-8")
    (root / "setup.py").write_text("", encoding="utf-8")

    return root
