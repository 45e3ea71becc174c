"""
Spell-check service factory and singleton management.
"""
from typing import Optional

from commit_spell.config import Settings, settings as default_settings
from commit_spell.services.spellcheck_base import SpellCheckService
from commit_spell.services.spellcheck_english import EnglishSpellCheckService
from commit_spell.utils.logger import get_logger

logger = get_logger("services.spellcheck")

# Singleton instance for the running hook
_spellcheck_service: Optional[SpellCheckService] = None


def create_spellcheck_service(config: Optional[Settings] = None) -> Optional[SpellCheckService]:
    """
    Create and load a spell-check service from settings.

    Args:
        config: Settings to build from (default: global settings)

    Returns:
        Loaded SpellCheckService, or None if the dictionary could not be loaded
    """
    config = config or default_settings

    service = EnglishSpellCheckService(
        dictionary_path=config.SPELLCHECK_DICTIONARY_PATH,
        cache_dir=str(config.cache_dir),
        cache_enabled=config.SPELLCHECK_CACHE_ENABLED,
        max_edit_distance=config.SPELLCHECK_MAX_EDIT_DISTANCE,
        prefix_length=config.SPELLCHECK_PREFIX_LENGTH,
        suggestion_count=config.SPELLCHECK_SUGGESTION_COUNT,
        language=config.SPELLCHECK_LANGUAGE,
    )

    if service.load():
        return service

    logger.warning(
        "Failed to load spell-check dictionary",
        language=config.SPELLCHECK_LANGUAGE,
    )
    return None


def get_spellcheck_service() -> Optional[SpellCheckService]:
    """
    Get the singleton spell-check service.

    Returns:
        SpellCheckService instance if initialized, None otherwise
    """
    return _spellcheck_service


def initialize_spellcheck(config: Optional[Settings] = None) -> bool:
    """
    Initialize the spell-check service singleton.

    Returns:
        True if initialized successfully, False otherwise
    """
    global _spellcheck_service

    logger.info("Initializing spell-check service...")
    _spellcheck_service = create_spellcheck_service(config)

    if _spellcheck_service is not None:
        logger.info("Spell-check service initialized successfully")
        return True
    return False
