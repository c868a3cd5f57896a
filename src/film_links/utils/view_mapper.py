"""Mapping of catalog records to Film/Actor view models.

Every function here is pure: no I/O, no shared state.
"""

from datetime import date
from typing import Iterable, List, Optional, Sequence, TypeVar

from ..core.models import (
    Actor,
    CatalogCastMember,
    CatalogCredits,
    CatalogCrewMember,
    CatalogMovie,
    CatalogPerson,
    CatalogSearchResult,
    CreditStub,
    Film,
)

IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w154"

PRIVILEGED_JOBS = (
    "Director",
    "Screenplay",
    "Original Music Composer",
    "Director of Photography",
    "Novel",
)

_WithId = TypeVar("_WithId", Actor, Film)


def image_url(path: Optional[str], base_url: str = IMAGE_BASE_URL) -> Optional[str]:
    """Build a CDN image URL, or None when there is no path."""
    if not path:
        return None
    return f"{base_url}{path}"


def release_year(release_date: Optional[date]) -> int:
    """Year of a release date, 0 when unknown."""
    return release_date.year if release_date else 0


def unique_by_id(items: Iterable[_WithId]) -> List[_WithId]:
    """Drop repeated ids, keeping the first occurrence."""
    seen = set()
    unique = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        unique.append(item)
    return unique


def order_films(films: Iterable[Film]) -> List[Film]:
    """Sort films newest first; films without a release date go last."""
    return sorted(
        films,
        key=lambda film: (film.release_date is not None, film.release_date or date.min),
        reverse=True,
    )


def _film(
    movie_id: int,
    name: str,
    poster_path: Optional[str],
    release_date: Optional[date],
    base_url: str,
) -> Film:
    return Film(
        id=movie_id,
        name=name,
        image=image_url(poster_path, base_url),
        release_date=release_date,
        release_year=release_year(release_date),
    )


def film_from_credit(stub: CreditStub, base_url: str = IMAGE_BASE_URL) -> Film:
    """Film for an entry in a person's filmography."""
    return _film(stub.id, stub.title, stub.poster_path, stub.release_date, base_url)


def film_from_search_result(
    result: CatalogSearchResult, base_url: str = IMAGE_BASE_URL
) -> Film:
    """Film for a search or discover result."""
    return _film(result.id, result.title, result.poster_path, result.release_date, base_url)


def film_from_movie(
    movie: CatalogMovie,
    base_url: str = IMAGE_BASE_URL,
    privileged_jobs: Sequence[str] = PRIVILEGED_JOBS,
) -> Film:
    """Film for full movie details, with its cast when credits were fetched."""
    film = _film(movie.id, movie.title, movie.poster_path, movie.release_date, base_url)
    if movie.credits is not None:
        film.cast = cast_from_credits(movie.credits, base_url, privileged_jobs)
    return film


def actor_from_cast_member(
    member: CatalogCastMember, base_url: str = IMAGE_BASE_URL
) -> Actor:
    """Actor for an acting credit; the title is the character."""
    return Actor(
        id=member.id,
        name=member.name,
        title=member.character,
        image=image_url(member.profile_path, base_url),
    )


def actor_from_crew_member(
    member: CatalogCrewMember, base_url: str = IMAGE_BASE_URL
) -> Actor:
    """Actor for a crew credit; the title is the job."""
    return Actor(
        id=member.id,
        name=member.name,
        title=member.job,
        image=image_url(member.profile_path, base_url),
    )


def actor_from_person(person: CatalogPerson, base_url: str = IMAGE_BASE_URL) -> Actor:
    """Actor for person details, without linked films."""
    return Actor(
        id=person.id,
        name=person.name,
        image=image_url(person.profile_path, base_url),
    )


def cast_from_credits(
    credits: CatalogCredits,
    base_url: str = IMAGE_BASE_URL,
    privileged_jobs: Sequence[str] = PRIVILEGED_JOBS,
) -> List[Actor]:
    """Notable crew followed by the cast, each by descending popularity.

    Uncredited cast members are kept. A person credited both on the crew
    and in the cast appears once, as crew.
    """
    crew = sorted(
        (member for member in credits.crew if member.job in privileged_jobs),
        key=lambda member: member.popularity,
        reverse=True,
    )
    cast = sorted(credits.cast, key=lambda member: member.popularity, reverse=True)

    actors: List[Actor] = [actor_from_crew_member(member, base_url) for member in crew]
    actors.extend(actor_from_cast_member(member, base_url) for member in cast)
    return unique_by_id(actors)

