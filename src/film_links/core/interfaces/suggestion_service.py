"""Suggestion service interface."""

from abc import ABC, abstractmethod

from ..models import SuggestionResponse


class ISuggestionService(ABC):
    """Interface for title suggestion services."""

    @abstractmethod
    async def find_suggestions(self, search: str) -> SuggestionResponse:
        """Find title suggestions for a search literal.

        Suggestions without a movie ID are removed before returning.
        Never raises: a failed request yields an empty response.

        Args:
            search: Search literal, usually "Title (Year)".

        Returns:
            Suggestion response.
        """
        pass
