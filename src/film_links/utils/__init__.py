"""Utility functions and classes."""

from .exceptions import (
    CatalogServiceError,
    ConfigurationError,
    FilmLinksError,
    QueryParseError,
)
from .query_parser import format_name_year, parse_name_year
from .view_mapper import (
    IMAGE_BASE_URL,
    PRIVILEGED_JOBS,
    actor_from_cast_member,
    actor_from_crew_member,
    actor_from_person,
    cast_from_credits,
    film_from_credit,
    film_from_movie,
    film_from_search_result,
    image_url,
    order_films,
    release_year,
    unique_by_id,
)

__all__ = [
    "FilmLinksError",
    "ConfigurationError",
    "CatalogServiceError",
    "QueryParseError",
    "parse_name_year",
    "format_name_year",
    "IMAGE_BASE_URL",
    "PRIVILEGED_JOBS",
    "image_url",
    "release_year",
    "unique_by_id",
    "order_films",
    "film_from_credit",
    "film_from_search_result",
    "film_from_movie",
    "actor_from_cast_member",
    "actor_from_crew_member",
    "actor_from_person",
    "cast_from_credits",
]
