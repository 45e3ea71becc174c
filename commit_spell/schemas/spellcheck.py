"""
Pydantic schemas for spell-check functionality.
"""
from typing import List

from pydantic import BaseModel, Field


class SpellingIssue(BaseModel):
    """A misspelled word with suggested corrections."""

    word: str = Field(description="Misspelled word as written in the commit message")
    suggestions: List[str] = Field(
        default_factory=list,
        description="Suggested corrections ordered by relevance",
    )
