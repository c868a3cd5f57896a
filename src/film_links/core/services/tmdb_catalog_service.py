"""TMDb catalog service implementation."""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence

import aiohttp

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import CatalogServiceError
from ..interfaces import ICatalogService
from ..models import (
    CatalogCastMember,
    CatalogCredits,
    CatalogCrewMember,
    CatalogMovie,
    CatalogPerson,
    CatalogSearchResult,
    CreditStub,
)


class TMDbCatalogService(ICatalogService, LoggerMixin):
    """TMDb catalog service implementation."""

    def __init__(self, config: Config) -> None:
        """Initialize TMDb catalog service.

        Args:
            config: Application configuration.
        """
        self._config = config
        self._tmdb_config = config.tmdb
        self._session: Optional[aiohttp.ClientSession] = None

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
        params = {"append_to_response": "credits"} if include_credits else {}

        try:
            data = await self._get_json(f"/movie/{movie_id}", params)
            if data is None:
                self.logger.info(f"Movie {movie_id} not found")
                return None
            return self._parse_movie(data)

        except Exception as e:
            error_msg = f"Failed to get movie details for TMDb ID {movie_id}: {e}"
            self.logger.error(error_msg)
            raise CatalogServiceError(error_msg) from e

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
        params = {"query": name, "include_adult": "false"}
        if year:
            params["primary_release_year"] = str(year)

        try:
            data = await self._get_json("/search/movie", params)
            results = self._parse_search_results(data)
            self.logger.info(f"Found {len(results)} movies for '{name}' (year={year or 'any'})")
            return results

        except Exception as e:
            error_msg = f"TMDb search failed for '{name}': {e}"
            self.logger.error(error_msg)
            raise CatalogServiceError(error_msg) from e

    async def get_person(self, person_id: int) -> Optional[CatalogPerson]:
        """Get person details with movie credits.

        Args:
            person_id: TMDb person ID.

        Returns:
            Person details or None if not found.

        Raises:
            CatalogServiceError: If request fails.
        """
        try:
            data = await self._get_json(
                f"/person/{person_id}", {"append_to_response": "movie_credits"}
            )
            if data is None:
                self.logger.info(f"Person {person_id} not found")
                return None
            return self._parse_person(data)

        except Exception as e:
            error_msg = f"Failed to get person details for TMDb ID {person_id}: {e}"
            self.logger.error(error_msg)
            raise CatalogServiceError(error_msg) from e

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
        if not person_ids:
            return []

        params = {
            # "|" is OR in TMDb discover filters
            "with_people": "|".join(str(person_id) for person_id in person_ids),
            "include_video": "false",
            "page": "1",
        }

        try:
            data = await self._get_json("/discover/movie", params)
            return self._parse_search_results(data)

        except Exception as e:
            error_msg = f"TMDb discover failed for people {list(person_ids)}: {e}"
            self.logger.error(error_msg)
            raise CatalogServiceError(error_msg) from e

    async def _get_json(
        self, path: str, params: Optional[Dict[str, str]] = None
    ) -> Optional[Dict[str, Any]]:
        """Issue a GET request against the TMDb API.

        Args:
            path: API path, starting with "/".
            params: Extra query parameters.

        Returns:
            Decoded JSON object, or None on 404.
        """
        url = f"{self._tmdb_config.base_url}{path}"
        query = {"api_key": self._tmdb_config.api_key, "language": self._tmdb_config.language}
        if params:
            query.update(params)

        async with self._get_session().get(url, params=query) as response:
            if response.status == 404:
                return None
            response.raise_for_status()
            data = await response.json()
            if not isinstance(data, dict):
                raise ValueError(f"Unexpected TMDb response for {path}")
            return data

    def _parse_movie(self, data: Dict[str, Any]) -> CatalogMovie:
        """Parse TMDb movie details into CatalogMovie.

        Args:
            data: TMDb movie data, with "credits" when appended.

        Returns:
            CatalogMovie object.
        """
        credits = None
        if isinstance(data.get("credits"), dict):
            credits = CatalogCredits(
                cast=[
                    CatalogCastMember(
                        id=member["id"],
                        name=member.get("name") or "",
                        profile_path=member.get("profile_path"),
                        character=member.get("character"),
                        popularity=member.get("popularity") or 0.0,
                    )
                    for member in data["credits"].get("cast", [])
                ],
                crew=[
                    CatalogCrewMember(
                        id=member["id"],
                        name=member.get("name") or "",
                        profile_path=member.get("profile_path"),
                        job=member.get("job"),
                        department=member.get("department"),
                        popularity=member.get("popularity") or 0.0,
                    )
                    for member in data["credits"].get("crew", [])
                ],
            )

        return CatalogMovie(
            id=data["id"],
            title=data.get("title") or "",
            poster_path=data.get("poster_path"),
            release_date=self._parse_date(data.get("release_date")),
            credits=credits,
        )

    def _parse_person(self, data: Dict[str, Any]) -> CatalogPerson:
        """Parse TMDb person details into CatalogPerson."""
        movie_credits = data.get("movie_credits") or {}

        return CatalogPerson(
            id=data["id"],
            name=data.get("name") or "",
            profile_path=data.get("profile_path"),
            cast_credits=[
                self._parse_credit(entry, character=entry.get("character"))
                for entry in movie_credits.get("cast", [])
            ],
            crew_credits=[
                self._parse_credit(entry, job=entry.get("job"))
                for entry in movie_credits.get("crew", [])
            ],
        )

    def _parse_credit(
        self,
        entry: Dict[str, Any],
        character: Optional[str] = None,
        job: Optional[str] = None,
    ) -> CreditStub:
        return CreditStub(
            id=entry["id"],
            title=entry.get("title") or "",
            poster_path=entry.get("poster_path"),
            release_date=self._parse_date(entry.get("release_date")),
            character=character,
            job=job,
        )

    def _parse_search_results(self, data: Optional[Dict[str, Any]]) -> List[CatalogSearchResult]:
        """Parse the "results" list of a search or discover response."""
        if not data:
            return []

        results = data.get("results", [])
        if not isinstance(results, list):
            return []

        return [
            CatalogSearchResult(
                id=result["id"],
                title=result.get("title") or "",
                poster_path=result.get("poster_path"),
                release_date=self._parse_date(result.get("release_date")),
            )
            for result in results
        ]

    @staticmethod
    def _parse_date(value: Optional[str]) -> Optional[date]:
        """Parse a TMDb date; TMDb sends "" for unknown dates."""
        if not value:
            return None
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError:
            return None

    def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session.

        Returns:
            HTTP session.
        """
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self._tmdb_config.timeout)
            self._session = aiohttp.ClientSession(
                timeout=timeout, headers={"Accept": "application/json"}
            )
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "TMDbCatalogService":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
