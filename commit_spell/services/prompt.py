"""
Interactive console prompts for replacing misspelled words.
"""
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from commit_spell.schemas.spellcheck import SpellingIssue
from commit_spell.utils.logger import get_logger

logger = get_logger("services.prompt")

TTY_PATH = "/dev/tty"


class Prompter:
    """Asks the user about misspellings over a pair of text streams."""

    def __init__(self, input_stream: TextIO, output_stream: TextIO):
        self._input = input_stream
        self._output = output_stream

    def _ask(self, question: str) -> Optional[str]:
        """Print a question and read one line; None on EOF."""
        self._output.write(question)
        self._output.flush()
        line = self._input.readline()
        if not line:
            return None
        return line.strip()

    def ask_replacement(self, issue: SpellingIssue) -> Optional[str]:
        """
        Ask for a replacement for a misspelled word.

        Args:
            issue: Misspelled word with its suggestions

        Returns:
            Replacement text, or None if the user skipped (blank line or EOF)
        """
        self._output.write(
            f"[REPLACE] '{issue.word}' - suggestions: {', '.join(issue.suggestions)}\n"
        )
        answer = self._ask("Enter replacement (or press ENTER to skip): ")
        return answer or None

    def confirm_proceed(self) -> bool:
        """
        Ask whether to commit despite remaining misspellings.

        Only an explicit "n" or "no" cancels; a blank line or EOF proceeds.
        """
        answer = self._ask("Do you want to proceed with the commit? [Y/n]: ")
        return (answer or "").lower() not in ("n", "no")


@contextmanager
def open_prompter(use_tty: bool = True) -> Iterator[Prompter]:
    """
    Build a Prompter on the controlling terminal when stdin is not one.

    git runs commit-msg hooks with stdin detached, so prompts read from
    /dev/tty when available and fall back to stdin otherwise.

    Args:
        use_tty: Allow opening /dev/tty

    Yields:
        Prompter bound to the chosen input and stdout
    """
    if not use_tty or sys.stdin.isatty():
        yield Prompter(sys.stdin, sys.stdout)
        return

    try:
        tty = open(TTY_PATH, "r", encoding="utf-8")
    except OSError as e:
        logger.debug("Terminal unavailable, prompting on stdin", error=str(e))
        yield Prompter(sys.stdin, sys.stdout)
        return

    with tty:
        yield Prompter(tty, sys.stdout)
