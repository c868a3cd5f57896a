"""Film and actor view models."""

from datetime import date
from typing import List, Optional, Set

from pydantic import BaseModel, Field


class Film(BaseModel):
    """Presentation view of a movie.

    ``Film()`` with every default is the empty result of a lookup that
    matched nothing.
    """

    id: int = Field(default=0, description="TMDb movie ID")
    name: str = Field(default="", description="Movie title")
    image: Optional[str] = Field(None, description="Poster URL")
    release_date: Optional[date] = Field(None, description="Release date")
    release_year: int = Field(default=0, ge=0, description="Release year, 0 when unknown")
    cast: Optional[List["Actor"]] = Field(None, description="Notable crew followed by the cast")

    def remove_actor(self, actor_id: int) -> None:
        """Drop an actor from the cast, if there is one."""
        if self.cast is not None:
            self.cast = [actor for actor in self.cast if actor.id != actor_id]


class Actor(BaseModel):
    """Presentation view of a person and the films linked to them."""

    id: int = Field(..., description="TMDb person ID")
    name: Optional[str] = Field(None, description="Person name")
    title: Optional[str] = Field(None, description="Character or job")
    image: Optional[str] = Field(None, description="Profile image URL")
    movies: List[Film] = Field(default_factory=list, description="Linked films")

    # Movie ids already cross-referenced for this instance; only ever grows.
    resolved_ids: Set[int] = Field(default_factory=set, exclude=True)

    def snapshot(self) -> "Actor":
        """Copy of this actor with its own movie list and no resolved ids."""
        return Actor(
            id=self.id,
            name=self.name,
            title=self.title,
            image=self.image,
            movies=list(self.movies),
        )

    def remove_movie(self, movie_id: int) -> None:
        """Drop a linked film."""
        self.movies = [film for film in self.movies if film.id != movie_id]
