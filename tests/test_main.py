"""Tests for the CLI entry point."""

from pathlib import Path
from unittest.mock import patch

from prnotify.main import main, parse_args


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.config == Path("config.yaml")
    assert args.check is False


def test_check_only_loads_config(tmp_path: Path, capsys) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("users:\n  foo: foo@email.com\n")
    with patch("prnotify.main.run") as mock_run:
        assert main(["--config", str(path), "--check"]) == 0
    mock_run.assert_not_called()
    assert "Config OK" in capsys.readouterr().out


def test_fatal_error_returns_1(tmp_path: Path) -> None:
    with patch("prnotify.main.run", side_effect=OSError("address in use")):
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 1


def test_keyboard_interrupt_returns_0(tmp_path: Path) -> None:
    with patch("prnotify.main.run", side_effect=KeyboardInterrupt):
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 0


def test_run_skips_server_when_webhook_disabled(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("webhook:\n  enabled: false\n")
    with patch("prnotify.webhook.server.run_webhook_server") as mock_server:
        assert main(["--config", str(path)]) == 0
    mock_server.assert_not_called()


def test_invalid_config_returns_1(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("users:\n  - foo\n")
    with patch("prnotify.main.run") as mock_run:
        assert main(["--config", str(path), "--check"]) == 1
    mock_run.assert_not_called()
