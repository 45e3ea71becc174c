"""
Abstract base class for spell-check services.
"""
from abc import ABC, abstractmethod
from typing import List


class SpellCheckService(ABC):
    """
    Abstract base class for spell-check service implementations.

    Concrete implementations should handle loading dictionaries,
    validating single words and producing suggestions for them.
    """

    @abstractmethod
    def check_word(self, word: str) -> bool:
        """
        Check a single word against the dictionary.

        Args:
            word: Word with surrounding punctuation already removed

        Returns:
            True if the word is spelled correctly, False otherwise
        """
        pass

    @abstractmethod
    def suggest(self, word: str) -> List[str]:
        """
        Suggest corrections for a word.

        Args:
            word: Misspelled word

        Returns:
            Suggested corrections ordered by relevance, possibly empty
        """
        pass

    @abstractmethod
    def is_loaded(self) -> bool:
        """Check if the dictionary is loaded and ready."""
        pass

    @abstractmethod
    def get_language(self) -> str:
        """Get the language code this service handles (e.g., 'en' for English)."""
        pass

    @abstractmethod
    def load(self) -> bool:
        """
        Load the dictionary.

        Returns:
            True if loaded successfully, False otherwise
        """
        pass
