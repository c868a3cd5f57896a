"""Link resolver service implementation."""

import asyncio
from typing import Awaitable, Iterable, List, Optional, TypeVar

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import (
    film_from_credit,
    format_name_year,
    image_url,
    order_films,
    release_year,
    unique_by_id,
)
from ..interfaces import IActorCache, ICatalogService, ILinkResolver, ISuggestionService
from ..models import Actor, CreditStub, Film

T = TypeVar("T")


async def gather_or_cancel(awaitables: Iterable[Awaitable[T]]) -> List[T]:
    """Run awaitables concurrently and wait for all of them.

    If one fails, the others are cancelled and the error is raised.
    """
    tasks = [asyncio.ensure_future(awaitable) for awaitable in awaitables]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


class LinkResolver(ILinkResolver, LoggerMixin):
    """Cross-references a person's credits against the suggestion service.

    Flow for one actor:
        cached = actor_cache.get(actor.id)
        if cached: copy its movies and stop
        person = catalog.get_person(actor.id)
        for each credit (concurrently, each movie id at most once):
            literal = "Title (Year)"
            if a suggestion for literal has exactly that title:
                keep the credit as a Film
        dedupe by id, newest first
        actor_cache.add(actor)
    """

    def __init__(
        self,
        config: Config,
        catalog_service: ICatalogService,
        suggestion_service: ISuggestionService,
        actor_cache: IActorCache,
    ):
        """Initialize link resolver.

        Args:
            config: Application configuration.
            catalog_service: Catalog service for person credits.
            suggestion_service: Suggestion service used to confirm credits.
            actor_cache: Store of already resolved actors.
        """
        self._config = config
        self._catalog_service = catalog_service
        self._suggestion_service = suggestion_service
        self._actor_cache = actor_cache
        self._image_base_url = config.tmdb.image_base_url
        self._max_concurrency = config.enrichment.max_concurrency
        self._semaphore: Optional[asyncio.Semaphore] = None
        self._semaphore_loop: Optional[asyncio.AbstractEventLoop] = None

    async def resolve_actor(self, actor_id: int) -> Actor:
        """Resolve an actor by ID."""
        return await self.resolve(Actor(id=actor_id))

    async def resolve(self, actor: Actor) -> Actor:
        """Fill in name, image and confirmed movies of an actor.

        Args:
            actor: Actor shell, typically mapped from a movie's credits.

        Returns:
            The same actor, resolved. Its title is left untouched.

        Raises:
            CatalogServiceError: If the catalog request fails.
        """
        async with self._actor_cache.lock(actor.id):
            cached = self._actor_cache.get(actor.id)
            if cached is not None:
                self.logger.debug(f"Actor {actor.id} served from cache")
                actor.name = cached.name
                actor.image = cached.image
                actor.movies = cached.movies
                return actor

            async with self._get_semaphore():
                person = await self._catalog_service.get_person(actor.id)
            if person is None:
                actor.movies = []
                return actor

            actor.name = person.name
            actor.image = image_url(person.profile_path, self._image_base_url)

            films = await gather_or_cancel(
                self.confirm_credit(actor, credit) for credit in person.all_credits
            )
            confirmed = [film for film in films if film is not None]
            actor.movies = order_films(unique_by_id(actor.movies + confirmed))

            self._actor_cache.add(actor)
            self.logger.info(
                f"Resolved {actor.name} ({actor.id}): {len(actor.movies)} of "
                f"{len(person.all_credits)} credits confirmed"
            )
            return actor

    async def resolve_many(
        self, actors: List[Actor], exclude_movie_id: Optional[int] = None
    ) -> List[Actor]:
        """Resolve several actors concurrently.

        Args:
            actors: Actors to resolve in place.
            exclude_movie_id: Movie to drop from every actor's movies.

        Returns:
            The same actors, resolved.
        """
        await gather_or_cancel(self.resolve(actor) for actor in actors)

        if exclude_movie_id is not None:
            for actor in actors:
                actor.remove_movie(exclude_movie_id)

        return actors

    async def confirm_credit(self, actor: Actor, credit: CreditStub) -> Optional[Film]:
        """Confirm one filmography entry against the suggestion service.

        Args:
            actor: Actor the credit belongs to.
            credit: Filmography entry.

        Returns:
            Film if a suggestion title matches exactly, otherwise None.
        """
        # No await between the check and the mark.
        if credit.id in actor.resolved_ids:
            return None
        actor.resolved_ids.add(credit.id)

        literal = format_name_year(credit.title, release_year(credit.release_date))
        async with self._get_semaphore():
            response = await self._suggestion_service.find_suggestions(literal)

        if not response.has_title(literal):
            self.logger.debug(f"No exact suggestion for '{literal}'")
            return None

        return film_from_credit(credit, self._image_base_url)

    def _get_semaphore(self) -> asyncio.Semaphore:
        """Get the semaphore bounding catalog and suggestion calls.

        A semaphore belongs to one event loop, so a new one is made when
        the resolver is used from another loop.
        """
        loop = asyncio.get_running_loop()
        if self._semaphore is None or self._semaphore_loop is not loop:
            self._semaphore = asyncio.Semaphore(self._max_concurrency)
            self._semaphore_loop = loop
        return self._semaphore
