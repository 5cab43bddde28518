import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from keysmith.exceptions import AbortedError
from keysmith.guard import ensure_writable, prompt_yes


def test_missing_file_needs_no_confirmation(tmp_path: Path, decline: MagicMock) -> None:
    ensure_writable(tmp_path / "key", force=False, confirm=decline)
    decline.assert_not_called()


def test_force_skips_prompt(tmp_path: Path, decline: MagicMock) -> None:
    target = tmp_path / "key"
    target.write_text("old")

    ensure_writable(target, force=True, confirm=decline)
    decline.assert_not_called()


def test_declined_overwrite_aborts(tmp_path: Path, decline: MagicMock) -> None:
    target = tmp_path / "key"
    target.write_text("old")

    with pytest.raises(AbortedError):
        ensure_writable(target, force=False, confirm=decline)

    question = decline.call_args[0][0]
    assert "already exists" in question
    assert str(target) in question


def test_accepted_overwrite_passes(tmp_path: Path, accept: MagicMock) -> None:
    target = tmp_path / "key"
    target.write_text("old")

    ensure_writable(target, force=False, confirm=accept)
    accept.assert_called_once()


def test_prompt_yes_uses_rich_confirm() -> None:
    with patch("keysmith.guard.Confirm.ask", return_value=True) as ask:
        assert prompt_yes("Overwrite?") is True
    assert ask.call_args[0][0] == "Overwrite?"


def test_prompt_yes_treats_eof_as_no() -> None:
    with patch("keysmith.guard.Confirm.ask", side_effect=EOFError):
        assert prompt_yes("Overwrite?") is False


def test_bracketed_path_shown_literally(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Paths with [/...] or [bold] are printed as-is, not parsed as markup."""
    target = tmp_path / "keys[/old][bold]"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text("old")
    output = io.StringIO()
    monkeypatch.setattr("keysmith.guard._console", Console(file=output, width=1000, highlight=False))
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n"))

    with pytest.raises(AbortedError):
        ensure_writable(target, force=False)

    assert "keys[/old][bold]" in output.getvalue()
    assert target.read_text() == "old"
