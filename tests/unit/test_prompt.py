"""
Unit tests for interactive prompting.
"""
import io
from unittest.mock import patch

import pytest

from commit_spell.schemas.spellcheck import SpellingIssue
from commit_spell.services import prompt as prompt_module
from commit_spell.services.prompt import Prompter, open_prompter


def _prompter(answer_text: str):
    output = io.StringIO()
    return Prompter(io.StringIO(answer_text), output), output


class TestAskReplacement:
    """Tests for Prompter.ask_replacement()."""

    def test_returns_entered_replacement(self):
        """Typed text is returned trimmed."""
        prompter, output = _prompter("  Hello \n")
        issue = SpellingIssue(word="Helo", suggestions=["hello", "help"])

        assert prompter.ask_replacement(issue) == "Hello"
        assert "[REPLACE] 'Helo' - suggestions: hello, help" in output.getvalue()
        assert "Enter replacement (or press ENTER to skip): " in output.getvalue()

    def test_blank_line_skips(self):
        """Pressing ENTER skips the word."""
        prompter, _ = _prompter("\n")
        assert prompter.ask_replacement(SpellingIssue(word="wrold")) is None

    def test_eof_skips(self):
        """Closed input skips the word."""
        prompter, _ = _prompter("")
        assert prompter.ask_replacement(SpellingIssue(word="wrold")) is None

    def test_no_suggestions_still_prompts(self):
        """Words without suggestions still get a prompt."""
        prompter, output = _prompter("qwerty\n")
        assert prompter.ask_replacement(SpellingIssue(word="qwzx")) == "qwerty"
        assert "[REPLACE] 'qwzx' - suggestions: \n" in output.getvalue()


class TestConfirmProceed:
    """Tests for Prompter.confirm_proceed()."""

    @pytest.mark.parametrize("answer", ["n", "N", "no", "No", " NO "])
    def test_no_cancels(self, answer):
        """Only an explicit no cancels the commit."""
        prompter, output = _prompter(f"{answer}\n")
        assert prompter.confirm_proceed() is False
        assert "Do you want to proceed with the commit? [Y/n]: " in output.getvalue()

    @pytest.mark.parametrize("answer", ["y", "yes", "", "maybe"])
    def test_other_answers_proceed(self, answer):
        """Anything else proceeds."""
        prompter, _ = _prompter(f"{answer}\n")
        assert prompter.confirm_proceed() is True

    def test_eof_proceeds(self):
        """Closed input proceeds."""
        prompter, _ = _prompter("")
        assert prompter.confirm_proceed() is True


class TestOpenPrompter:
    """Tests for open_prompter()."""

    def test_uses_stdin_when_tty_disabled(self, monkeypatch):
        """With use_tty off the prompter reads stdin."""
        stdin = io.StringIO("answer\n")
        monkeypatch.setattr("sys.stdin", stdin)

        with open_prompter(use_tty=False) as prompter:
            assert prompter._input is stdin

    def test_opens_terminal_when_stdin_detached(self, monkeypatch, tmp_path):
        """A non-terminal stdin is replaced by the controlling terminal."""
        fake_tty = tmp_path / "tty"
        fake_tty.write_text("world\n", encoding="utf-8")
        monkeypatch.setattr("sys.stdin", io.StringIO())
        monkeypatch.setattr(prompt_module, "TTY_PATH", str(fake_tty))

        with open_prompter(use_tty=True) as prompter:
            assert prompter._input.name == str(fake_tty)
            handle = prompter._input
        assert handle.closed

    def test_falls_back_to_stdin_without_terminal(self, monkeypatch, tmp_path):
        """When /dev/tty cannot be opened stdin is used."""
        stdin = io.StringIO()
        monkeypatch.setattr("sys.stdin", stdin)
        monkeypatch.setattr(prompt_module, "TTY_PATH", str(tmp_path / "missing" / "tty"))

        with open_prompter(use_tty=True) as prompter:
            assert prompter._input is stdin

    def test_interactive_stdin_used_directly(self, monkeypatch):
        """A terminal stdin is used without opening /dev/tty."""

        class TerminalInput(io.StringIO):
            def isatty(self):
                return True

        stdin = TerminalInput()
        monkeypatch.setattr("sys.stdin", stdin)

        with patch("builtins.open") as mock_open:
            with open_prompter(use_tty=True) as prompter:
                assert prompter._input is stdin
            mock_open.assert_not_called()
