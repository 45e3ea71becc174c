"""
English spell-check service using SymSpellPy.
"""
import hashlib
import pickle
import time
from importlib import resources
from pathlib import Path
from typing import List, Optional

from symspellpy import SymSpell, Verbosity

from commit_spell.config import settings
from commit_spell.services.spellcheck_base import SpellCheckService
from commit_spell.utils.logger import get_logger


logger = get_logger("services.spellcheck_english")

# Frequency dictionary shipped inside the symspellpy distribution
BUNDLED_DICTIONARY = "frequency_dictionary_en_82_765.txt"
POSSESSIVE_SUFFIX = "'s"


def bundled_dictionary_path() -> Path:
    """Path of the English frequency dictionary bundled with symspellpy."""
    return Path(str(resources.files("symspellpy") / BUNDLED_DICTIONARY))


class EnglishSpellCheckService(SpellCheckService):
    """
    English spell-check service using SymSpellPy.

    Loads the index from a pickle cache if one matches the dictionary,
    otherwise builds it from the dictionary file and saves the pickle.
    """

    def __init__(
        self,
        dictionary_path: Optional[str] = None,
        cache_dir: Optional[str] = None,
        cache_enabled: Optional[bool] = None,
        max_edit_distance: Optional[int] = None,
        prefix_length: Optional[int] = None,
        suggestion_count: Optional[int] = None,
        language: Optional[str] = None,
    ):
        """
        Initialize English spell-check service.

        Args:
            dictionary_path: Dictionary file, one "word" or "word count" per line
                (default from config, else the symspellpy English dictionary)
            cache_dir: Directory for the pickle cache (default from config)
            cache_enabled: Whether to read/write the pickle cache (default from config)
            max_edit_distance: Maximum edit distance for suggestions (default from config)
            prefix_length: SymSpell optimization parameter (default from config)
            suggestion_count: Maximum suggestions per word (default from config)
            language: Language code reported by get_language() (default from config)
        """
        self._symspell: Optional[SymSpell] = None
        self._loaded = False

        dictionary_path = dictionary_path or settings.SPELLCHECK_DICTIONARY_PATH
        self._dictionary_path = Path(dictionary_path) if dictionary_path else bundled_dictionary_path()
        self._cache_dir = Path(cache_dir) if cache_dir else settings.cache_dir
        self._cache_enabled = settings.SPELLCHECK_CACHE_ENABLED if cache_enabled is None else cache_enabled

        self._max_edit_distance = max_edit_distance or settings.SPELLCHECK_MAX_EDIT_DISTANCE
        self._prefix_length = prefix_length or settings.SPELLCHECK_PREFIX_LENGTH
        self._suggestion_count = suggestion_count or settings.SPELLCHECK_SUGGESTION_COUNT
        self._language = language or settings.SPELLCHECK_LANGUAGE

        logger.debug(
            "English spell-check service initialized",
            dictionary_path=str(self._dictionary_path),
            cache_dir=str(self._cache_dir),
            cache_enabled=self._cache_enabled,
            max_edit_distance=self._max_edit_distance,
            prefix_length=self._prefix_length,
            suggestion_count=self._suggestion_count,
        )

    @property
    def pickle_path(self) -> Path:
        """
        Cache file for the current dictionary and SymSpell parameters.

        The name embeds a hash of the dictionary location, size and mtime
        so an edited dictionary is rebuilt instead of served stale.
        """
        try:
            stat = self._dictionary_path.stat()
            fingerprint = f"{self._dictionary_path.resolve()}:{stat.st_size}:{stat.st_mtime_ns}"
        except OSError:
            fingerprint = str(self._dictionary_path)
        fingerprint += f":{self._max_edit_distance}:{self._prefix_length}"
        key = hashlib.sha256(fingerprint.encode("utf-8")).hexdigest()[:16]
        return self._cache_dir / f"symspell_{self._language}_{key}.pkl"

    def load(self) -> bool:
        """
        Load dictionary from pickle or build from the dictionary file.

        Returns:
            True if loaded successfully, False otherwise
        """
        if self._loaded:
            return True

        # Try loading from pickle first (fast)
        if self._cache_enabled and self.pickle_path.exists():
            if self._load_from_pickle():
                return True

        if self._dictionary_path.exists():
            return self._build_from_dictionary()

        logger.error(
            "Dictionary file not found",
            dictionary_path=str(self._dictionary_path),
        )
        return False

    def _load_from_pickle(self) -> bool:
        """Load SymSpell from pickle file."""
        pickle_path = self.pickle_path
        try:
            start_time = time.time()

            with open(pickle_path, "rb") as f:
                self._symspell = pickle.load(f)

            self._loaded = True
            logger.info(
                "Dictionary loaded from pickle",
                load_time_seconds=round(time.time() - start_time, 2),
                pickle_path=str(pickle_path),
            )
            return True

        except Exception as e:
            logger.warning(
                "Failed to load pickle, will rebuild from dictionary",
                error=str(e),
                pickle_path=str(pickle_path),
            )
            self._symspell = None
            return False

    def _build_from_dictionary(self) -> bool:
        """Build SymSpell index from the dictionary file and save pickle."""
        try:
            start_time = time.time()

            symspell = SymSpell(
                max_dictionary_edit_distance=self._max_edit_distance,
                prefix_length=self._prefix_length,
            )

            # Accepts plain word lists and "word count" frequency lists
            word_count = 0
            with open(self._dictionary_path, "r", encoding="utf-8") as f:
                for line in f:
                    parts = line.split()
                    if not parts:
                        continue
                    count = 1
                    if len(parts) > 1 and parts[1].isdigit():
                        # symspellpy drops entries below its count threshold of 1
                        count = max(int(parts[1]), 1)
                    symspell.create_dictionary_entry(parts[0].lower(), count)
                    word_count += 1

            if word_count == 0:
                logger.error(
                    "No words loaded from dictionary",
                    dictionary_path=str(self._dictionary_path),
                )
                return False

            self._symspell = symspell
            logger.info(
                "Dictionary built",
                word_count=word_count,
                build_time_seconds=round(time.time() - start_time, 2),
                dictionary_path=str(self._dictionary_path),
            )

            if self._cache_enabled:
                self._save_pickle()
            self._loaded = True
            return True

        except Exception as e:
            logger.error(
                "Failed to build dictionary",
                error=str(e),
                dictionary_path=str(self._dictionary_path),
                exc_info=True,
            )
            return False

    def _save_pickle(self) -> None:
        """Save SymSpell to pickle file for fast loading."""
        pickle_path = self.pickle_path
        try:
            pickle_path.parent.mkdir(parents=True, exist_ok=True)

            with open(pickle_path, "wb") as f:
                pickle.dump(self._symspell, f)

            logger.info("Dictionary saved to pickle", pickle_path=str(pickle_path))

        except Exception as e:
            logger.warning(
                "Failed to save pickle (will rebuild on next run)",
                error=str(e),
                pickle_path=str(pickle_path),
            )

    def check_word(self, word: str) -> bool:
        """
        Check a single word.

        An unloaded dictionary accepts everything, so a broken setup
        never flags words.
        """
        if not word:
            return True
        if not self._loaded or self._symspell is None:
            logger.warning("Spell-check called but dictionary not loaded")
            return True

        word_lower = word.lower().replace("\u2019", "'")
        if self._is_known(word_lower):
            return True

        # Possessives are valid when their stem is
        if word_lower.endswith(POSSESSIVE_SUFFIX):
            stem = word_lower[: -len(POSSESSIVE_SUFFIX)]
            return bool(stem) and self._is_known(stem)
        return False

    def _is_known(self, word_lower: str) -> bool:
        """Exact dictionary lookup of a lowercase word."""
        matches = self._symspell.lookup(word_lower, Verbosity.TOP, max_edit_distance=0)
        return bool(matches) and matches[0].term == word_lower

    def suggest(self, word: str) -> List[str]:
        """
        Suggest corrections for a misspelled word.

        Args:
            word: Misspelled word

        Returns:
            Up to suggestion_count corrections ordered by edit distance and frequency
        """
        if not self._loaded or self._symspell is None:
            return []

        word_lower = word.lower().replace("\u2019", "'")
        suggestions = self._symspell.lookup(
            word_lower,
            Verbosity.CLOSEST,
            max_edit_distance=self._max_edit_distance,
        )
        terms = [s.term for s in suggestions if s.term != word_lower]
        return terms[: self._suggestion_count]

    def is_loaded(self) -> bool:
        """Check if dictionary is loaded."""
        return self._loaded

    def get_language(self) -> str:
        """Get language code."""
        return self._language
