"""
Ignore-word list loaded from a .spellignore file.
"""
from pathlib import Path
from typing import Set, Union

from commit_spell.utils.logger import get_logger

logger = get_logger("services.ignore_list")


def load_ignore_words(path: Union[str, Path]) -> Set[str]:
    """
    Load words that should never be flagged.

    The file holds one word per line. Words are stored lowercase, blank
    lines are skipped, and a missing or unreadable file yields an empty set.

    Args:
        path: Path to the ignore file

    Returns:
        Set of lowercase words
    """
    path = Path(path)
    if not path.is_file():
        logger.debug("No ignore file found", path=str(path))
        return set()

    try:
        with open(path, "r", encoding="utf-8") as f:
            words = {line.strip().lower() for line in f}
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read ignore file", path=str(path), error=str(e))
        return set()

    words.discard("")
    logger.debug("Ignore file loaded", path=str(path), word_count=len(words))
    return words


def is_ignored(word: str, ignore_words: Set[str]) -> bool:
    """Case-insensitive membership test against the ignore set."""
    return word.lower() in ignore_words
