"""
commit-msg hook pipeline.

Filters comments, scans for misspellings, prompts for replacements,
rewrites the message, re-scans and asks for confirmation if needed.
"""
import sys
from pathlib import Path
from typing import Dict, List, Optional, Set, TextIO, Union

from commit_spell.services.commit_message import (
    CommitMessageReadError,
    CommitMessageWriteError,
    apply_replacements,
    collect_issues,
    find_misspellings,
    read_commit_message,
    strip_comments,
    write_commit_message,
)
from commit_spell.services.prompt import Prompter
from commit_spell.services.spellcheck_base import SpellCheckService
from commit_spell.utils.logger import get_logger

logger = get_logger("services.hook")

EXIT_OK = 0
EXIT_FAILURE = 1


def _report(words: List[str], stream: TextIO) -> None:
    for word in words:
        stream.write(f"  - {word}\n")


def run_spellcheck_hook(
    message_path: Union[str, Path],
    service: SpellCheckService,
    ignore_words: Set[str],
    prompter: Optional[Prompter] = None,
    interactive: bool = True,
    comment_char: str = "#",
    min_word_length: int = 1,
    err: Optional[TextIO] = None,
) -> int:
    """
    Spell-check a commit message file.

    Args:
        message_path: Commit message file passed in by git
        service: Loaded spell-check service
        ignore_words: Lowercase words never to flag
        prompter: Console prompter (required when interactive)
        interactive: Offer replacements instead of failing outright
        comment_char: Comment prefix to skip
        min_word_length: Skip words shorter than this
        err: Stream for diagnostics (default: stderr)

    Returns:
        0 if the commit may proceed, 1 otherwise
    """
    err = err or sys.stderr

    try:
        raw = read_commit_message(message_path)
    except CommitMessageReadError as e:
        err.write(f"[ERROR] Failed to read commit message: {e}\n")
        return EXIT_FAILURE

    content = strip_comments(raw, comment_char)
    issues = collect_issues(content, service, ignore_words, min_word_length)
    if not issues:
        logger.info("No spelling mistakes found", path=str(message_path))
        return EXIT_OK

    err.write("[SPELLCHECK] Found possible spelling mistakes:\n")
    _report([issue.word for issue in issues], err)

    if not interactive or prompter is None:
        err.write("[SPELLCHECK] Fix the message or add the words to the ignore file.\n")
        return EXIT_FAILURE

    replacements: Dict[str, str] = {}
    for issue in issues:
        replacement = prompter.ask_replacement(issue)
        if replacement is not None:
            replacements[issue.word] = replacement

    logger.info("Applying replacements", replacement_count=len(replacements))

    try:
        write_commit_message(message_path, apply_replacements(raw, replacements, comment_char))
    except CommitMessageWriteError as e:
        err.write(f"[ERROR] Failed to write commit message: {e}\n")
        return EXIT_FAILURE

    try:
        updated = read_commit_message(message_path)
    except CommitMessageReadError as e:
        err.write(f"[ERROR] Failed to re-read commit message: {e}\n")
        return EXIT_FAILURE

    remaining = find_misspellings(
        strip_comments(updated, comment_char), service, ignore_words, min_word_length
    )
    if remaining:
        err.write("\n[WARNING] Spelling mistakes still found after editing:\n")
        _report(remaining, err)

        if not prompter.confirm_proceed():
            err.write("[CANCELLED] Commit aborted due to unresolved spelling issues.\n")
            return EXIT_FAILURE

        logger.info("Proceeding despite remaining misspellings", remaining_count=len(remaining))

    return EXIT_OK
