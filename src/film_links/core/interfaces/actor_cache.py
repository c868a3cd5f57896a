"""Actor cache interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, Optional

from ..models import Actor


class IActorCache(ABC):
    """Interface for the store of fully resolved actors."""

    @abstractmethod
    def get(self, actor_id: int) -> Optional[Actor]:
        """Get a copy of a resolved actor.

        Args:
            actor_id: TMDb person ID.

        Returns:
            Copy of the cached actor or None on a miss.
        """
        pass

    @abstractmethod
    def add(self, actor: Actor) -> bool:
        """Store a snapshot of a resolved actor unless one is already stored.

        Args:
            actor: Resolved actor.

        Returns:
            True if the actor was stored.
        """
        pass

    @abstractmethod
    def lock(self, actor_id: int) -> AsyncContextManager[None]:
        """Lock serializing resolution of one actor ID.

        Args:
            actor_id: TMDb person ID.

        Returns:
            Async context manager holding the lock shared by every caller
            on the running event loop asking for this ID.
        """
        pass
