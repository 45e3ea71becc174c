"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Hook settings loaded from environment variables."""

    # Spell-check Configuration
    SPELLCHECK_LANGUAGE: str = "en"
    SPELLCHECK_DICTIONARY_PATH: Optional[str] = None  # None = English frequency dictionary bundled with symspellpy
    SPELLCHECK_CACHE_ENABLED: bool = True  # Pickle the built SymSpell index for fast loading
    SPELLCHECK_CACHE_PATH: str = str(Path.home() / ".cache" / "commit-spell")
    SPELLCHECK_MAX_EDIT_DISTANCE: int = 2  # Max edit distance for suggestions (1-3)
    SPELLCHECK_PREFIX_LENGTH: int = 7  # SymSpell optimization parameter
    SPELLCHECK_SUGGESTION_COUNT: int = 5  # Max suggestions per misspelled word
    SPELLCHECK_MIN_WORD_LENGTH: int = 2  # Skip words shorter than this

    # Commit Message Configuration
    SPELLCHECK_IGNORE_FILE: str = ".spellignore"  # One word per line, relative to the working directory
    SPELLCHECK_COMMENT_CHAR: str = "#"  # Lines starting with this are not checked

    # Prompting Configuration
    SPELLCHECK_INTERACTIVE: bool = True  # Offer word-by-word replacement
    SPELLCHECK_USE_TTY: bool = True  # git hooks run without stdin, so prompt on /dev/tty

    # Logging Configuration
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cache_dir(self) -> Path:
        """Directory holding pickled dictionaries."""
        return Path(self.SPELLCHECK_CACHE_PATH).expanduser()


# Global settings instance
settings = Settings()
