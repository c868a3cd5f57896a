"""Movie catalog service interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..models import CatalogMovie, CatalogPerson, CatalogSearchResult


class ICatalogService(ABC):
    """Interface for movie catalog services."""

    @abstractmethod
    async def get_movie(
        self, movie_id: int, include_credits: bool = False
    ) -> Optional[CatalogMovie]:
        """Get movie details by ID.

        Args:
            movie_id: TMDb movie ID.
            include_credits: Also fetch cast and crew.

        Returns:
            Movie details or None if not found.

        Raises:
            CatalogServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def search_movie_by_name_year(
        self, name: str, year: int = 0
    ) -> List[CatalogSearchResult]:
        """Search movies by title.

        Args:
            name: Title to search for.
            year: Primary release year filter, 0 for none.

        Returns:
            Matching movies, best match first. Empty when nothing matched.

        Raises:
            CatalogServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def get_person(self, person_id: int) -> Optional[CatalogPerson]:
        """Get person details with movie credits.

        Args:
            person_id: TMDb person ID.

        Returns:
            Person details or None if not found.

        Raises:
            CatalogServiceError: If request fails.
        """
        pass

    @abstractmethod
    async def discover_movies_with_people(
        self, person_ids: Sequence[int]
    ) -> List[CatalogSearchResult]:
        """Discover movies featuring any of the given people.

        Args:
            person_ids: TMDb person IDs.

        Returns:
            First page of matching movies.

        Raises:
            CatalogServiceError: If request fails.
        """
        pass
