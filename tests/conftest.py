"""
Pytest configuration and fixtures for commit-spell tests.
"""
import io
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

from commit_spell.services.prompt import Prompter
from commit_spell.services.spellcheck_base import SpellCheckService


class WordListSpellCheckService(SpellCheckService):
    """In-memory spell-check service backed by a plain word set."""

    def __init__(
        self,
        words: Iterable[str],
        suggestions: Optional[Dict[str, List[str]]] = None,
    ):
        self.words = {word.lower() for word in words}
        self.suggestions = suggestions or {}
        self.checked: List[str] = []

    def check_word(self, word: str) -> bool:
        self.checked.append(word)
        return word.lower() in self.words

    def suggest(self, word: str) -> List[str]:
        return list(self.suggestions.get(word.lower(), []))

    def is_loaded(self) -> bool:
        return True

    def get_language(self) -> str:
        return "en"

    def load(self) -> bool:
        return True


ENGLISH_WORDS = [
    "a", "add", "and", "bug", "cache", "fix", "for", "hello", "in", "message",
    "parser", "the", "to", "update", "world", "commit", "test", "tests",
]


@pytest.fixture
def service() -> WordListSpellCheckService:
    """Word-list service that knows a handful of common words."""
    return WordListSpellCheckService(
        ENGLISH_WORDS,
        suggestions={
            "helo": ["hello", "help", "hero"],
            "wrold": ["world"],
            "paser": ["parser", "paper"],
        },
    )


@pytest.fixture
def message_file(tmp_path: Path):
    """Factory writing a commit message file and returning its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "COMMIT_EDITMSG"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scripted_prompter():
    """Factory for a Prompter fed with canned answers, one per line."""

    def _build(*answers: str) -> Prompter:
        stdin = io.StringIO("".join(f"{answer}\n" for answer in answers))
        return Prompter(stdin, io.StringIO())

    return _build
