"""In-memory actor cache implementation."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional, Tuple

from ...infrastructure.logging import LoggerMixin
from ..interfaces import IActorCache
from ..models import Actor


class ActorCache(IActorCache, LoggerMixin):
    """Append-only store of resolved actors, shared by every lookup.

    Entries are never evicted or replaced. Stored and returned actors are
    snapshots, so callers can trim their copy without touching the cache.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._actors: Dict[int, Actor] = {}
        self._locks: Dict[Tuple[asyncio.AbstractEventLoop, int], asyncio.Lock] = {}
        self._lock_users: Dict[Tuple[asyncio.AbstractEventLoop, int], int] = {}

    def get(self, actor_id: int) -> Optional[Actor]:
        """Get a copy of a resolved actor.

        Args:
            actor_id: TMDb person ID.

        Returns:
            Copy of the cached actor or None on a miss.
        """
        actor = self._actors.get(actor_id)
        if actor is None:
            return None
        return actor.snapshot()

    def add(self, actor: Actor) -> bool:
        """Store a snapshot of a resolved actor unless one is already stored.

        Args:
            actor: Resolved actor.

        Returns:
            True if the actor was stored.
        """
        if actor.id in self._actors:
            return False

        self._actors[actor.id] = actor.snapshot()
        self.logger.debug(f"Cached actor {actor.id} with {len(actor.movies)} movies")
        return True

    @asynccontextmanager
    async def lock(self, actor_id: int) -> AsyncIterator[None]:
        """Hold the lock serializing resolution of one actor ID.

        Locks are kept per event loop and only while someone holds or waits
        for them.

        Args:
            actor_id: TMDb person ID.
        """
        key = (asyncio.get_running_loop(), actor_id)
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._lock_users[key] = self._lock_users.get(key, 0) + 1

        try:
            async with lock:
                yield
        finally:
            self._lock_users[key] -= 1
            if not self._lock_users[key]:
                del self._lock_users[key]
                del self._locks[key]

    def __contains__(self, actor_id: object) -> bool:
        return actor_id in self._actors

    def __len__(self) -> int:
        return len(self._actors)
