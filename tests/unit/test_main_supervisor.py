from __future__ import annotations

"""
Unit tests for the Main Entry Point and Global Supervisor.
"""

import sys
from unittest.mock import patch

import pytest


@pytest.fixture
def supervisor(monkeypatch):
    """Import treewalker.main without leaking its excepthook."""
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    import treewalker.main as entry
    return entry


def test_main_delegates_exit_code(supervisor) -> None:
    with patch("treewalker.interface.cli.app.main", return_value=0) as cli_main:
        assert supervisor.main() == 0

    cli_main.assert_called_once_with()


def test_main_reports_unexpected_crash(supervisor, capsys) -> None:
    with patch("treewalker.interface.cli.app.main", side_effect=RuntimeError("kaboom")):
        code = supervisor.main()

    err = capsys.readouterr().err
    assert code == 1
    assert "CRITICAL ERROR (TREEWALKER)" in err
    assert "RuntimeError: kaboom" in err
