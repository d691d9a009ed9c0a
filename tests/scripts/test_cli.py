import logging
import os
import subprocess
import sys
from unittest.mock import patch

import pytest

from funbox.config import AppSettings
from funbox.scripts.cli import build_parser, main


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.setattr(AppSettings, "_instance", None)
    monkeypatch.delenv("FUNBOX_LOG_LEVEL", raising=False)


def run_module(*args, **env):
    return subprocess.run(
        [sys.executable, "-m", "funbox", *args],
        capture_output=True,
        text=True,
        check=False,
        env={**os.environ, **env},
    )


def test_cli_prints_doubled_result(capsys):
    """The program doubles 1 and prints exactly one line."""
    assert main([]) == 0

    captured = capsys.readouterr()
    assert captured.out == "Result: 2\n"


def test_cli_verbose_flag_enables_debug_logging():
    with patch("logging.basicConfig") as mock_config:
        main(["--verbose"])
    assert mock_config.call_args.kwargs["level"] == logging.DEBUG


def test_cli_uses_configured_level_by_default(monkeypatch):
    monkeypatch.setenv("FUNBOX_LOG_LEVEL", "ERROR")
    with patch("logging.basicConfig") as mock_config:
        main([])
    assert mock_config.call_args.kwargs["level"] == logging.ERROR


def test_cli_invalid_log_level_falls_back_to_defaults(monkeypatch, capsys):
    monkeypatch.setenv("FUNBOX_LOG_LEVEL", "LOUD")
    with patch("logging.basicConfig") as mock_config, patch(
        "funbox.scripts.cli.logger"
    ) as mock_logger:
        assert main([]) == 0

    assert capsys.readouterr().out == "Result: 2\n"
    assert mock_config.call_args.kwargs["level"] == logging.WARNING
    assert "Ignoring invalid FUNBOX_* settings" in mock_logger.warning.call_args.args[0]


def test_parser_has_no_required_arguments():
    args = build_parser().parse_args([])
    assert args.verbose is False


def test_module_entry_point():
    """`python -m funbox` writes the result line to stdout and exits 0."""
    proc = run_module("-v")
    assert proc.returncode == 0
    assert proc.stdout == "Result: 2\n"
    # logs never leak onto stdout
    assert "funbox" in proc.stderr


def test_module_entry_point_survives_bad_environment():
    proc = run_module(FUNBOX_LOG_LEVEL="LOUD")
    assert proc.returncode == 0
    assert proc.stdout == "Result: 2\n"
    assert "Ignoring invalid FUNBOX_* settings" in proc.stderr
