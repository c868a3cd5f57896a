"""Core data models."""

from .catalog import (
    CatalogCastMember,
    CatalogCredits,
    CatalogCrewMember,
    CatalogMovie,
    CatalogPerson,
    CatalogSearchResult,
    CreditStub,
)
from .film import Actor, Film
from .suggestion import Suggestion, SuggestionResponse

# Rebuild models to resolve forward references
Film.model_rebuild()

__all__ = [
    "CatalogCastMember",
    "CatalogCrewMember",
    "CatalogCredits",
    "CatalogMovie",
    "CatalogPerson",
    "CatalogSearchResult",
    "CreditStub",
    "Film",
    "Actor",
    "Suggestion",
    "SuggestionResponse",
]
