"""Suggestion service data models."""

from typing import List, Optional

from pydantic import BaseModel, Field


class Suggestion(BaseModel):
    """Title suggested for a search literal."""

    movie_id: Optional[int] = Field(None, description="Movie ID, missing on a failed match")
    title: Optional[str] = Field(None, description='Title as "Name (Year)"')
    popularity_rank: Optional[int] = Field(None, description="Popularity rank")


class SuggestionResponse(BaseModel):
    """Response body of the suggestion service."""

    suggestions: List[Suggestion] = Field(default_factory=list)
    message: str = Field(default="")

    def purge_failures(self) -> None:
        """Remove suggestions that carry no movie ID."""
        self.suggestions = [s for s in self.suggestions if s.movie_id is not None]

    def has_title(self, title: str) -> bool:
        """Check for a suggestion whose title equals ``title`` exactly."""
        return any(s.title == title for s in self.suggestions)
