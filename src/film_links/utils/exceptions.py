"""Custom exceptions for the application."""


class FilmLinksError(Exception):
    """Base exception for all application errors."""

    pass


class ConfigurationError(FilmLinksError):
    """Configuration-related errors."""

    pass


class CatalogServiceError(FilmLinksError):
    """Movie catalog (TMDb) service errors."""

    pass


class QueryParseError(FilmLinksError, ValueError):
    """Malformed "Title (Year)" query text."""

    pass
