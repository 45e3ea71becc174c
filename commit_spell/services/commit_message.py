"""
Commit message reading, tokenizing and rewriting.
"""
import re
from pathlib import Path
from typing import Dict, Iterable, List, Set, Tuple, Union

from commit_spell.schemas.spellcheck import SpellingIssue
from commit_spell.services.ignore_list import is_ignored
from commit_spell.services.spellcheck_base import SpellCheckService
from commit_spell.utils.logger import get_logger

logger = get_logger("services.commit_message")

TOKEN_PATTERN = re.compile(r"\S+")

# Written by `git commit --verbose`; everything below it is the diff
SCISSORS_LINE = "------------------------ >8 ------------------------"


class CommitMessageError(Exception):
    """Base exception for commit message file errors."""
    pass


class CommitMessageReadError(CommitMessageError):
    """Raised when the commit message file cannot be read."""
    pass


class CommitMessageWriteError(CommitMessageError):
    """Raised when the commit message file cannot be written."""
    pass


def read_commit_message(path: Union[str, Path]) -> str:
    """
    Read a commit message file.

    Raises:
        CommitMessageReadError: If the file is missing or not valid UTF-8
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CommitMessageReadError(str(e)) from e


def write_commit_message(path: Union[str, Path], text: str) -> None:
    """
    Overwrite a commit message file.

    Raises:
        CommitMessageWriteError: If the file cannot be written
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise CommitMessageWriteError(str(e)) from e


def _is_comment(line: str, comment_char: str) -> bool:
    return bool(comment_char) and line.lstrip().startswith(comment_char)


def _is_scissors(line: str, comment_char: str) -> bool:
    return bool(comment_char) and line.strip() == f"{comment_char} {SCISSORS_LINE}"


def _split_checked_lines(text: str, comment_char: str) -> Tuple[List[str], str]:
    """Split text into lines worth checking and the verbatim tail after the scissors line."""
    lines = text.splitlines(keepends=True)
    for index, line in enumerate(lines):
        if _is_scissors(line, comment_char):
            return lines[:index], "".join(lines[index:])
    return lines, ""


def strip_comments(text: str, comment_char: str = "#") -> str:
    """
    Remove comment lines from a commit message.

    Lines whose first non-blank character is comment_char are dropped,
    as is everything from the `git commit --verbose` scissors line on.

    Args:
        text: Raw commit message
        comment_char: Comment prefix (git's core.commentChar)

    Returns:
        Remaining lines joined with newlines
    """
    lines, _ = _split_checked_lines(text, comment_char)
    return "\n".join(
        line.rstrip("\r\n") for line in lines if not _is_comment(line, comment_char)
    )


def clean_token(token: str) -> Tuple[str, str, str]:
    """
    Split a token into leading punctuation, core word and trailing punctuation.

    Only alphabetic characters delimit the core; a token without letters
    has an empty core and is returned entirely as the prefix.

    >>> clean_token('"Helo,')
    ('"', 'Helo', ',')
    """
    start = 0
    while start < len(token) and not token[start].isalpha():
        start += 1
    end = len(token)
    while end > start and not token[end - 1].isalpha():
        end -= 1
    return token[:start], token[start:end], token[end:]


def iter_words(text: str) -> Iterable[str]:
    """Yield the non-empty cleaned core of each whitespace-separated token."""
    for token in text.split():
        _, core, _ = clean_token(token)
        if core:
            yield core


def find_misspellings(
    text: str,
    service: SpellCheckService,
    ignore_words: Set[str],
    min_word_length: int = 1,
) -> List[str]:
    """
    Scan text and return misspelled words.

    Args:
        text: Text with comment lines already removed
        service: Loaded spell-check service
        ignore_words: Lowercase words never to flag
        min_word_length: Skip words shorter than this

    Returns:
        Distinct misspelled words in order of first appearance
        (deduplicated case-insensitively, first spelling kept)
    """
    seen: Set[str] = set()
    misspellings: List[str] = []

    for word in iter_words(text):
        key = word.lower()
        if key in seen or len(word) < min_word_length:
            continue
        seen.add(key)

        if is_ignored(word, ignore_words):
            continue
        if not service.check_word(word):
            misspellings.append(word)

    logger.debug("Scan finished", misspelling_count=len(misspellings))
    return misspellings


def collect_issues(
    text: str,
    service: SpellCheckService,
    ignore_words: Set[str],
    min_word_length: int = 1,
) -> List[SpellingIssue]:
    """Find misspellings and attach dictionary suggestions to each."""
    return [
        SpellingIssue(word=word, suggestions=service.suggest(word))
        for word in find_misspellings(text, service, ignore_words, min_word_length)
    ]


def apply_replacements(
    text: str,
    replacements: Dict[str, str],
    comment_char: str = "#",
) -> str:
    """
    Replace flagged words in a commit message.

    Every token whose core matches a key (exactly, else case-insensitively)
    gets the replacement with its surrounding punctuation kept. Whitespace,
    comment lines and anything below the scissors line are left untouched.

    Args:
        text: Raw commit message
        replacements: Mapping of misspelled word to replacement
        comment_char: Comment prefix

    Returns:
        Rewritten commit message
    """
    if not replacements:
        return text

    lowered = {word.lower(): replacement for word, replacement in replacements.items()}

    def replace_token(match: "re.Match[str]") -> str:
        token = match.group(0)
        prefix, core, suffix = clean_token(token)
        if not core:
            return token
        replacement = replacements.get(core, lowered.get(core.lower()))
        if replacement is None:
            return token
        return f"{prefix}{replacement}{suffix}"

    lines, tail = _split_checked_lines(text, comment_char)
    rewritten = [
        line if _is_comment(line, comment_char) else TOKEN_PATTERN.sub(replace_token, line)
        for line in lines
    ]
    return "".join(rewritten) + tail
