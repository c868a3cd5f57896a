"""Movie links lookup interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Actor, Film, SuggestionResponse


class IMovieLinksService(ABC):
    """Interface for the movie and actor lookups offered to callers."""

    @abstractmethod
    async def get_movie_by_name(self, name_year: str) -> Film:
        """Look up a movie with its cast by "Title (Year)".

        Args:
            name_year: Title, optionally followed by the year in parentheses.

        Returns:
            Film with cast, or an empty Film when nothing matched.

        Raises:
            QueryParseError: If the year is not an integer.
            CatalogServiceError: If a catalog request fails.
        """
        pass

    @abstractmethod
    async def get_links_for_actor(self, actor_id: int, movie_id: int) -> Actor:
        """Resolve an actor's linked films, leaving one movie out.

        Args:
            actor_id: TMDb person ID.
            movie_id: Movie to leave out of the result.

        Returns:
            Resolved actor.

        Raises:
            CatalogServiceError: If a catalog request fails.
        """
        pass

    @abstractmethod
    async def get_links_by_name(self, name_year: str) -> Film:
        """Look up a movie by "Title (Year)" and resolve its cast's links.

        Args:
            name_year: Title, optionally followed by the year in parentheses.

        Returns:
            Film with linked cast, or an empty Film when nothing matched.

        Raises:
            QueryParseError: If the year is not an integer.
            CatalogServiceError: If a catalog request fails.
        """
        pass

    @abstractmethod
    async def get_links(self, movie_id: int) -> Film:
        """Look up a movie by ID and resolve its cast's links.

        Args:
            movie_id: TMDb movie ID.

        Returns:
            Film whose cast only holds actors with other linked films.

        Raises:
            CatalogServiceError: If a catalog request fails.
        """
        pass

    @abstractmethod
    async def get_movie(self, movie_id: int, actor_id: Optional[int] = None) -> Film:
        """Look up a movie with its cast by ID.

        Args:
            movie_id: TMDb movie ID.
            actor_id: Person to leave out of the cast.

        Returns:
            Film with cast, or an empty Film when not found.

        Raises:
            CatalogServiceError: If a catalog request fails.
        """
        pass

    @abstractmethod
    async def get_suggestions(self, search: str) -> SuggestionResponse:
        """Get title suggestions for free text.

        Args:
            search: Search text.

        Returns:
            Suggestion response, empty on failure.
        """
        pass

    @abstractmethod
    async def get_actor(self, actor_id: int) -> Actor:
        """Look up a person without resolving links.

        Args:
            actor_id: TMDb person ID.

        Returns:
            Actor with no movies.

        Raises:
            CatalogServiceError: If a catalog request fails.
        """
        pass

    @abstractmethod
    async def discover_related(self, movie_id: int) -> List[Film]:
        """Discover movies sharing people with a movie's cast.

        Args:
            movie_id: TMDb movie ID.

        Returns:
            Related films, empty when the movie is unknown or has no cast.

        Raises:
            CatalogServiceError: If a catalog request fails.
        """
        pass
