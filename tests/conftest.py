"""Pytest configuration and fixtures."""

from datetime import date
from typing import Dict, List, Optional, Sequence

import pytest

from film_links.config import ConfigManager
from film_links.core.interfaces import ICatalogService, ISuggestionService
from film_links.core.models import (
    CatalogCastMember,
    CatalogCredits,
    CatalogCrewMember,
    CatalogMovie,
    CatalogPerson,
    CatalogSearchResult,
    CreditStub,
    Suggestion,
    SuggestionResponse,
)
from film_links.infrastructure import Container

INCEPTION = 27205
DARK_KNIGHT = 155
MEMENTO = 77
TITANIC = 597
REVENANT = 281957
UNRELEASED = 900001

NOLAN = 525
DICAPRIO = 6193
EXTRA = 99001


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "integration: integration tests")


class FakeCatalogService(ICatalogService):
    """In-memory catalog that records every call."""

    def __init__(
        self,
        movies: Dict[int, CatalogMovie],
        people: Dict[int, CatalogPerson],
        search_results: Optional[Dict[str, List[CatalogSearchResult]]] = None,
    ):
        self.movies = movies
        self.people = people
        self.search_results = search_results or {}
        self.movie_calls: List[int] = []
        self.person_calls: List[int] = []
        self.search_calls: List[tuple] = []
        self.discover_calls: List[List[int]] = []

    async def get_movie(self, movie_id, include_credits=False):
        self.movie_calls.append(movie_id)
        movie = self.movies.get(movie_id)
        if movie is None:
            return None
        if include_credits:
            return movie.model_copy(deep=True)
        return movie.model_copy(update={"credits": None})

    async def search_movie_by_name_year(self, name, year=0):
        self.search_calls.append((name, year))
        return list(self.search_results.get(f"{name}|{year}", []))

    async def get_person(self, person_id):
        self.person_calls.append(person_id)
        return self.people.get(person_id)

    async def discover_movies_with_people(self, person_ids: Sequence[int]):
        self.discover_calls.append(list(person_ids))
        return [
            CatalogSearchResult(
                id=stub.id,
                title=stub.title,
                poster_path=stub.poster_path,
                release_date=stub.release_date,
            )
            for person_id in person_ids
            if person_id in self.people
            for stub in self.people[person_id].all_credits
        ]


class FakeSuggestionService(ISuggestionService):
    """Suggestion service that knows a fixed set of titles."""

    def __init__(self, known_titles: Sequence[str]):
        self.known_titles = set(known_titles)
        self.calls: List[str] = []

    async def find_suggestions(self, search):
        self.calls.append(search)
        if search not in self.known_titles:
            return SuggestionResponse()
        return SuggestionResponse(
            suggestions=[Suggestion(movie_id=1, title=search, popularity_rank=1)]
        )


def _stub(movie_id, title, released, poster=None, character=None, job=None):
    return CreditStub(
        id=movie_id,
        title=title,
        poster_path=poster,
        release_date=released,
        character=character,
        job=job,
    )


@pytest.fixture
def inception():
    """Inception with a director, a lead and an uncredited extra."""
    return CatalogMovie(
        id=INCEPTION,
        title="Inception",
        poster_path="/inception.jpg",
        release_date=date(2010, 7, 15),
        credits=CatalogCredits(
            cast=[
                CatalogCastMember(id=EXTRA, name="Extra", character="Dreamer (uncredited)"),
                CatalogCastMember(
                    id=DICAPRIO,
                    name="Leonardo DiCaprio",
                    profile_path="/leo.jpg",
                    character="Cobb",
                    popularity=9,
                ),
            ],
            crew=[
                CatalogCrewMember(
                    id=NOLAN,
                    name="Christopher Nolan",
                    profile_path="/nolan.jpg",
                    job="Director",
                    department="Directing",
                    popularity=10,
                ),
            ],
        ),
    )


@pytest.fixture
def people():
    """Filmographies for the people credited on Inception."""
    return {
        NOLAN: CatalogPerson(
            id=NOLAN,
            name="Christopher Nolan",
            profile_path="/nolan.jpg",
            cast_credits=[],
            crew_credits=[
                _stub(INCEPTION, "Inception", date(2010, 7, 15), job="Director"),
                _stub(MEMENTO, "Memento", date(2000, 10, 11), job="Director"),
                _stub(DARK_KNIGHT, "The Dark Knight", date(2008, 7, 16), job="Director"),
                _stub(DARK_KNIGHT, "The Dark Knight", date(2008, 7, 16), job="Screenplay"),
                _stub(UNRELEASED, "Untitled Nolan Event Film", None, job="Director"),
            ],
        ),
        DICAPRIO: CatalogPerson(
            id=DICAPRIO,
            name="Leonardo DiCaprio",
            profile_path="/leo.jpg",
            cast_credits=[
                _stub(TITANIC, "Titanic", date(1997, 11, 18), "/titanic.jpg", character="Jack"),
                _stub(INCEPTION, "Inception", date(2010, 7, 15), character="Cobb"),
                _stub(REVENANT, "The Revenant", date(2015, 12, 25), character="Hugh Glass"),
            ],
            crew_credits=[],
        ),
        EXTRA: CatalogPerson(id=EXTRA, name="Extra"),
    }


@pytest.fixture
def known_titles():
    """Titles the suggestion service confirms."""
    return [
        "Inception (2010)",
        "Memento (2000)",
        "The Dark Knight (2008)",
        "Untitled Nolan Event Film",
        "Titanic (1997)",
        "The Revenant (2015)",
    ]


@pytest.fixture
def catalog_service(inception, people):
    """Fake catalog with Inception and its people."""
    return FakeCatalogService(
        movies={INCEPTION: inception},
        people=people,
        search_results={
            "Inception|2010": [
                CatalogSearchResult(
                    id=INCEPTION, title="Inception", release_date=date(2010, 7, 15)
                )
            ],
            "Inception|0": [
                CatalogSearchResult(
                    id=INCEPTION, title="Inception", release_date=date(2010, 7, 15)
                )
            ],
        },
    )


@pytest.fixture
def suggestion_service(known_titles):
    """Fake suggestion service."""
    return FakeSuggestionService(known_titles)


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary configuration file."""
    config_content = """
tmdb:
  api_key: "test-tmdb-key"

suggestions:
  base_url: "http://suggestions.test/suggestion-list/movies"
  timeout: 5

enrichment:
  max_concurrency: 4
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def config_manager(temp_config_file):
    """Create a configuration manager with test config."""
    return ConfigManager(temp_config_file)


@pytest.fixture
def config(config_manager):
    """Load test configuration."""
    return config_manager.load_config()


@pytest.fixture
def container(config_manager, catalog_service, suggestion_service):
    """Container with default services, backed by the fake catalog and suggestions."""
    container = Container(config_manager)
    container.configure_default_services()
    container.register_instance(ICatalogService, catalog_service)
    container.register_instance(ISuggestionService, suggestion_service)
    return container
