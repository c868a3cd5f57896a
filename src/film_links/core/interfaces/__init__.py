"""Core interfaces for dependency injection."""

from .actor_cache import IActorCache
from .catalog_service import ICatalogService
from .link_resolver import ILinkResolver
from .movie_links_service import IMovieLinksService
from .suggestion_service import ISuggestionService

__all__ = [
    "ICatalogService",
    "ISuggestionService",
    "IActorCache",
    "ILinkResolver",
    "IMovieLinksService",
]
