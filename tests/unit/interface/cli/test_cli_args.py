from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies the positional path, the boolean flags (store_true) and the
usage error raised when the path is missing.
"""

import pytest

from treewalker.domain.tree_models import TreeConfig
from treewalker.interface.cli.args import args_to_config, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_path_only_uses_defaults():
    config = args_to_config(parse_args(["some/dir"]))

    assert config == TreeConfig(root_path="some/dir", ignore_hidden=False)


def test_cli_ignore_hidden_flag():
    config = args_to_config(parse_args(["some/dir", "--ignore-hidden"]))

    assert config.ignore_hidden is True


def test_cli_flag_before_path():
    config = args_to_config(parse_args(["--ignore-hidden", "some/dir"]))

    assert config.root_path == "some/dir"
    assert config.ignore_hidden is True


def test_cli_path_is_not_validated_at_parse_time():
    config = args_to_config(parse_args(["/definitely/not/here"]))

    assert config.root_path == "/definitely/not/here"


def test_cli_diagnostic_flags():
    config = args_to_config(parse_args(["dir", "--debug", "--log-file", "out/tw.log"]))

    assert config.debug is True
    assert config.log_file == "out/tw.log"


def test_cli_missing_path_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args([])

    assert exc_info.value.code != 0
    assert "usage: treewalker" in capsys.readouterr().err


def test_cli_flag_takes_no_value(capsys):
    with pytest.raises(SystemExit):
        parse_args(["dir", "--ignore-hidden=yes"])
