"""
Command-line entry point for the commit-msg spell-check hook.

Usage:
    commit-spell .git/COMMIT_EDITMSG
    commit-spell --no-interactive --ignore-file docs/.spellignore "$1"

Exit codes:
    0  message is clean, or the user chose to proceed
    1  unreadable message file, misspellings in non-interactive mode,
       or the user cancelled the commit
"""
import argparse
import sys
from typing import List, Optional

from commit_spell import __version__
from commit_spell.config import settings
from commit_spell.services.commit_message import CommitMessageReadError, read_commit_message
from commit_spell.services.hook import EXIT_FAILURE, EXIT_OK, run_spellcheck_hook
from commit_spell.services.ignore_list import load_ignore_words
from commit_spell.services.prompt import open_prompter
from commit_spell.services.spellcheck import get_spellcheck_service, initialize_spellcheck
from commit_spell.utils.logger import get_logger, setup_logging

logger = get_logger("main")


def build_parser() -> argparse.ArgumentParser:
    """Build the hook's argument parser."""
    parser = argparse.ArgumentParser(
        prog="commit-spell",
        description="Spell-check a git commit message and offer interactive fixes",
    )
    parser.add_argument(
        "commit_msg_file",
        nargs="?",
        help="Path to the commit message file (passed by git as $1)",
    )
    parser.add_argument(
        "--ignore-file",
        default=settings.SPELLCHECK_IGNORE_FILE,
        help=f"Words never to flag, one per line (default: {settings.SPELLCHECK_IGNORE_FILE})",
    )
    parser.add_argument(
        "--dictionary",
        default=None,
        help="Dictionary file with one 'word' or 'word count' per line "
             "(default: bundled English frequency dictionary)",
    )
    parser.add_argument(
        "--no-interactive",
        dest="interactive",
        action="store_false",
        default=settings.SPELLCHECK_INTERACTIVE,
        help="Report misspellings and fail instead of prompting",
    )
    parser.add_argument(
        "--no-tty",
        dest="use_tty",
        action="store_false",
        default=settings.SPELLCHECK_USE_TTY,
        help="Prompt on stdin even when it is not a terminal",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Log level (default: {settings.LOG_LEVEL})",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the hook and return its exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if not args.commit_msg_file:
        print("[ERROR] No commit message file provided.", file=sys.stderr)
        return EXIT_FAILURE

    config = settings
    if args.dictionary:
        config = settings.model_copy(update={"SPELLCHECK_DICTIONARY_PATH": args.dictionary})

    try:
        read_commit_message(args.commit_msg_file)
    except CommitMessageReadError as e:
        print(f"[ERROR] Failed to read commit message: {e}", file=sys.stderr)
        return EXIT_FAILURE

    ignore_words = load_ignore_words(args.ignore_file)
    logger.info(
        "Checking commit message",
        path=args.commit_msg_file,
        interactive=args.interactive,
        ignore_word_count=len(ignore_words),
    )

    if not initialize_spellcheck(config):
        print(
            "[WARNING] Spell-check dictionary could not be loaded; skipping spell-check.",
            file=sys.stderr,
        )
        return EXIT_OK
    service = get_spellcheck_service()

    with open_prompter(args.use_tty) as prompter:
        return run_spellcheck_hook(
            args.commit_msg_file,
            service,
            ignore_words,
            prompter=prompter,
            interactive=args.interactive,
            comment_char=config.SPELLCHECK_COMMENT_CHAR,
            min_word_length=config.SPELLCHECK_MIN_WORD_LENGTH,
        )


if __name__ == "__main__":
    sys.exit(main())
