"""Movie links lookup service implementation."""

from typing import List, Optional

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import (
    actor_from_person,
    film_from_movie,
    film_from_search_result,
    parse_name_year,
)
from ..interfaces import ICatalogService, ILinkResolver, IMovieLinksService, ISuggestionService
from ..models import Actor, Film, SuggestionResponse


class MovieLinksService(IMovieLinksService, LoggerMixin):
    """Movie and actor lookups offered to callers.

    Lookups that match nothing return an empty Film or Actor rather than
    raising. Catalog transport failures propagate as CatalogServiceError.
    """

    def __init__(
        self,
        config: Config,
        catalog_service: ICatalogService,
        suggestion_service: ISuggestionService,
        link_resolver: ILinkResolver,
    ):
        """Initialize movie links service.

        Args:
            config: Application configuration.
            catalog_service: Catalog service for movie and person details.
            suggestion_service: Suggestion service for free-text suggestions.
            link_resolver: Resolver for actor links.
        """
        self._config = config
        self._catalog_service = catalog_service
        self._suggestion_service = suggestion_service
        self._link_resolver = link_resolver
        self._image_base_url = config.tmdb.image_base_url
        self._privileged_jobs = config.enrichment.privileged_jobs

    async def get_movie_by_name(self, name_year: str) -> Film:
        """Look up a movie with its cast by "Title (Year)"."""
        movie_id = await self._find_movie_id(name_year)
        if movie_id is None:
            return Film()
        return await self.get_movie(movie_id)

    async def get_links_for_actor(self, actor_id: int, movie_id: int) -> Actor:
        """Resolve an actor's linked films, leaving one movie out."""
        actor = await self._link_resolver.resolve_actor(actor_id)
        actor.remove_movie(movie_id)
        return actor

    async def get_links_by_name(self, name_year: str) -> Film:
        """Look up a movie by "Title (Year)" and resolve its cast's links."""
        movie_id = await self._find_movie_id(name_year)
        if movie_id is None:
            return Film()
        return await self.get_links(movie_id)

    async def get_links(self, movie_id: int) -> Film:
        """Look up a movie by ID and resolve its cast's links.

        Every cast member is resolved once, concurrently. Members left
        without other films are dropped.
        """
        film = await self._fetch_film(movie_id)
        if film is None:
            return Film()

        if film.cast is not None:
            await self._link_resolver.resolve_many(film.cast, exclude_movie_id=movie_id)
            film.cast = [actor for actor in film.cast if actor.movies]
            self.logger.info(f"{film.name}: {len(film.cast)} linked cast members")

        return film

    async def get_movie(self, movie_id: int, actor_id: Optional[int] = None) -> Film:
        """Look up a movie with its cast by ID."""
        film = await self._fetch_film(movie_id)
        if film is None:
            return Film()

        if actor_id is not None:
            film.remove_actor(actor_id)
        return film

    async def get_suggestions(self, search: str) -> SuggestionResponse:
        """Get title suggestions for free text."""
        return await self._suggestion_service.find_suggestions(search)

    async def get_actor(self, actor_id: int) -> Actor:
        """Look up a person without resolving links."""
        person = await self._catalog_service.get_person(actor_id)
        if person is None:
            return Actor(id=actor_id)
        return actor_from_person(person, self._image_base_url)

    async def discover_related(self, movie_id: int) -> List[Film]:
        """Discover movies sharing people with a movie's cast."""
        film = await self._fetch_film(movie_id)
        if film is None or not film.cast:
            return []

        results = await self._catalog_service.discover_movies_with_people(
            [actor.id for actor in film.cast]
        )
        return [
            film_from_search_result(result, self._image_base_url)
            for result in results
            if result.id != movie_id
        ]

    async def _find_movie_id(self, name_year: str) -> Optional[int]:
        """Parse "Title (Year)" and return the ID of the best search match.

        Raises:
            QueryParseError: If the year is not an integer.
        """
        name, year = parse_name_year(name_year)
        results = await self._catalog_service.search_movie_by_name_year(name, year)
        if not results:
            self.logger.info(f"No movie matches '{name_year}'")
            return None
        return results[0].id

    async def _fetch_film(self, movie_id: int) -> Optional[Film]:
        """Fetch a movie with credits and map it to a Film."""
        movie = await self._catalog_service.get_movie(movie_id, include_credits=True)
        if movie is None:
            return None
        return film_from_movie(movie, self._image_base_url, self._privileged_jobs)
