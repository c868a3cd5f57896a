"""Link resolver interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Actor, CreditStub, Film


class ILinkResolver(ABC):
    """Interface for actor/movie cross-reference resolution."""

    @abstractmethod
    async def resolve_actor(self, actor_id: int) -> Actor:
        """Resolve an actor by ID.

        Args:
            actor_id: TMDb person ID.

        Returns:
            Actor whose movies are the confirmed credits.

        Raises:
            CatalogServiceError: If the catalog request fails.
        """
        pass

    @abstractmethod
    async def resolve(self, actor: Actor) -> Actor:
        """Fill in name, image and confirmed movies of an actor.

        Args:
            actor: Actor shell, typically mapped from a movie's credits.

        Returns:
            The same actor, resolved.

        Raises:
            CatalogServiceError: If the catalog request fails.
        """
        pass

    @abstractmethod
    async def resolve_many(
        self, actors: List[Actor], exclude_movie_id: Optional[int] = None
    ) -> List[Actor]:
        """Resolve several actors concurrently.

        Args:
            actors: Actors to resolve in place.
            exclude_movie_id: Movie to drop from every actor's movies.

        Returns:
            The same actors, resolved.

        Raises:
            CatalogServiceError: If a catalog request fails.
        """
        pass

    @abstractmethod
    async def confirm_credit(self, actor: Actor, credit: CreditStub) -> Optional[Film]:
        """Confirm one filmography entry against the suggestion service.

        Each movie ID is looked up at most once per actor instance.

        Args:
            actor: Actor the credit belongs to.
            credit: Filmography entry.

        Returns:
            Film if a suggestion title matches exactly, otherwise None.
        """
        pass
