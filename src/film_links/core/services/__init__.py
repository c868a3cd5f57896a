"""Core service implementations."""

from .actor_cache import ActorCache
from .link_resolver import LinkResolver, gather_or_cancel
from .movie_links_service import MovieLinksService
from .suggestion_service import SuggestionService
from .tmdb_catalog_service import TMDbCatalogService

__all__ = [
    "ActorCache",
    "LinkResolver",
    "MovieLinksService",
    "SuggestionService",
    "TMDbCatalogService",
    "gather_or_cancel",
]
