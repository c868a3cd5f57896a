"""Test the movie links lookup service."""

from unittest.mock import AsyncMock

import pytest

from film_links.core.models import Film
from film_links.core.services import ActorCache, LinkResolver, MovieLinksService
from film_links.utils import CatalogServiceError, QueryParseError


@pytest.fixture
def link_resolver(config, catalog_service, suggestion_service):
    """Create link resolver with its own cache."""
    return LinkResolver(config, catalog_service, suggestion_service, ActorCache())


@pytest.fixture
def service(config, catalog_service, suggestion_service, link_resolver):
    """Create movie links service over the fake services."""
    return MovieLinksService(config, catalog_service, suggestion_service, link_resolver)


@pytest.mark.asyncio
async def test_get_movie_by_name(service, catalog_service):
    """Test looking up a movie by "Title (Year)"."""
    film = await service.get_movie_by_name("Inception (2010)")

    assert catalog_service.search_calls == [("Inception", 2010)]
    assert film.id == 27205
    assert [actor.id for actor in film.cast] == [525, 6193, 99001]
    assert all(actor.movies == [] for actor in film.cast)


@pytest.mark.asyncio
async def test_get_movie_by_name_without_match(service):
    """Test that an unmatched title gives an empty film."""
    assert await service.get_movie_by_name("Nothing (1900)") == Film()


@pytest.mark.asyncio
async def test_get_movie_by_name_invalid_year(service, catalog_service):
    """Test that a malformed year is rejected before any request."""
    with pytest.raises(QueryParseError):
        await service.get_movie_by_name("Inception (twenty ten)")

    assert catalog_service.search_calls == []


@pytest.mark.asyncio
async def test_get_movie_excluding_actor(service):
    """Test leaving one person out of the cast."""
    film = await service.get_movie(27205, actor_id=6193)

    assert [actor.id for actor in film.cast] == [525, 99001]


@pytest.mark.asyncio
async def test_get_movie_unknown(service):
    """Test that an unknown movie gives an empty film."""
    film = await service.get_movie(1)

    assert film.id == 0
    assert film.cast is None


@pytest.mark.asyncio
async def test_get_links(service):
    """Test resolving the cast of a movie."""
    film = await service.get_links(27205)

    assert film.name == "Inception"
    # The extra has no other films and is dropped
    assert [actor.id for actor in film.cast] == [525, 6193]
    nolan, dicaprio = film.cast
    assert nolan.title == "Director"
    assert [movie.id for movie in nolan.movies] == [155, 77, 900001]
    assert [movie.id for movie in dicaprio.movies] == [281957, 597]


@pytest.mark.asyncio
async def test_get_links_by_name(service):
    """Test resolving the cast of a movie looked up by title."""
    film = await service.get_links_by_name("Inception")

    assert film.id == 27205
    assert len(film.cast) == 2


@pytest.mark.asyncio
async def test_get_links_unknown_movie(service):
    """Test that links for an unknown movie give an empty film."""
    assert await service.get_links(1) == Film()
    assert await service.get_links_by_name("Nothing") == Film()


@pytest.mark.asyncio
async def test_get_links_reuses_resolved_actors(service, suggestion_service):
    """Test that a second lookup is served from the cache."""
    await service.get_links(27205)
    calls = len(suggestion_service.calls)

    film = await service.get_links(27205)

    assert len(suggestion_service.calls) == calls
    assert [actor.id for actor in film.cast] == [525, 6193]


@pytest.mark.asyncio
async def test_get_links_catalog_failure(service, catalog_service):
    """Test that catalog failures propagate."""
    catalog_service.get_movie = AsyncMock(side_effect=CatalogServiceError("down"))

    with pytest.raises(CatalogServiceError):
        await service.get_links(27205)


@pytest.mark.asyncio
async def test_get_links_for_actor(service):
    """Test resolving one actor and leaving a movie out."""
    actor = await service.get_links_for_actor(6193, 597)

    assert actor.name == "Leonardo DiCaprio"
    assert [movie.id for movie in actor.movies] == [281957, 27205]


@pytest.mark.asyncio
async def test_get_actor(service, suggestion_service):
    """Test a person lookup that does not resolve links."""
    actor = await service.get_actor(525)

    assert actor.name == "Christopher Nolan"
    assert actor.movies == []
    assert suggestion_service.calls == []


@pytest.mark.asyncio
async def test_get_actor_unknown(service):
    """Test that an unknown person gives a bare actor."""
    actor = await service.get_actor(424242)

    assert actor.id == 424242
    assert actor.name is None


@pytest.mark.asyncio
async def test_get_suggestions(service):
    """Test that suggestions are passed through."""
    response = await service.get_suggestions("Memento (2000)")

    assert [s.title for s in response.suggestions] == ["Memento (2000)"]


@pytest.mark.asyncio
async def test_discover_related(service, catalog_service):
    """Test discovering movies that share people with the cast."""
    films = await service.discover_related(27205)

    assert catalog_service.discover_calls == [[525, 6193, 99001]]
    ids = [film.id for film in films]
    assert 27205 not in ids
    assert 155 in ids and 597 in ids


@pytest.mark.asyncio
async def test_discover_related_unknown_movie(service, catalog_service):
    """Test that an unknown movie has no related movies."""
    assert await service.discover_related(1) == []
    assert catalog_service.discover_calls == []
