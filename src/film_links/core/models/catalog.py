"""Records returned by the movie catalog."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class CatalogCastMember(BaseModel):
    """Acting credit on a movie."""

    id: int = Field(..., description="TMDb person ID")
    name: str = Field(default="", description="Person name")
    profile_path: Optional[str] = Field(None, description="Profile image path")
    character: Optional[str] = Field(None, description="Character played")
    popularity: float = Field(default=0.0, description="TMDb popularity score")


class CatalogCrewMember(BaseModel):
    """Crew credit on a movie."""

    id: int = Field(..., description="TMDb person ID")
    name: str = Field(default="", description="Person name")
    profile_path: Optional[str] = Field(None, description="Profile image path")
    job: Optional[str] = Field(None, description="Crew job")
    department: Optional[str] = Field(None, description="Crew department")
    popularity: float = Field(default=0.0, description="TMDb popularity score")


class CatalogCredits(BaseModel):
    """Cast and crew of a movie."""

    cast: List[CatalogCastMember] = Field(default_factory=list)
    crew: List[CatalogCrewMember] = Field(default_factory=list)


class CatalogMovie(BaseModel):
    """Movie details."""

    id: int = Field(..., description="TMDb movie ID")
    title: str = Field(default="", description="Movie title")
    poster_path: Optional[str] = Field(None, description="Poster image path")
    release_date: Optional[date] = Field(None, description="Release date")
    credits: Optional[CatalogCredits] = Field(
        None, description="Credits, only when requested"
    )


class CatalogSearchResult(BaseModel):
    """Movie summary from a search or discover query."""

    id: int = Field(..., description="TMDb movie ID")
    title: str = Field(default="", description="Movie title")
    poster_path: Optional[str] = Field(None, description="Poster image path")
    release_date: Optional[date] = Field(None, description="Release date")


class CreditStub(BaseModel):
    """Movie entry in a person's filmography."""

    id: int = Field(..., description="TMDb movie ID")
    title: str = Field(default="", description="Movie title")
    poster_path: Optional[str] = Field(None, description="Poster image path")
    release_date: Optional[date] = Field(None, description="Release date")
    character: Optional[str] = Field(None, description="Character, for acting credits")
    job: Optional[str] = Field(None, description="Job, for crew credits")


class CatalogPerson(BaseModel):
    """Person details with movie credits."""

    id: int = Field(..., description="TMDb person ID")
    name: str = Field(default="", description="Person name")
    profile_path: Optional[str] = Field(None, description="Profile image path")
    cast_credits: List[CreditStub] = Field(default_factory=list)
    crew_credits: List[CreditStub] = Field(default_factory=list)

    @property
    def all_credits(self) -> List[CreditStub]:
        """Acting credits followed by crew credits."""
        return self.cast_credits + self.crew_credits
