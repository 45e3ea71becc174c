"""
Pydantic schemas shared by the hook services.
"""
from commit_spell.schemas.spellcheck import SpellingIssue

__all__ = [
    "SpellingIssue",
]
