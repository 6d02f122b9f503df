from typing import Any, Optional

from pydantic import BaseModel, Field


class MediaUrl(BaseModel):
    url: Optional[str] = None


class CompanyRoles(BaseModel):
    developers: list[str] = Field(default_factory=list)
    publishers: list[str] = Field(default_factory=list)


class GameSummary(BaseModel):
    """Simplified view of an IGDB game returned by GET /game/{id}."""
    id: Optional[int] = None
    name: Optional[str] = None
    summary: Optional[str] = None
    releaseDate: str
    cover: Optional[MediaUrl] = None
    artworks: list[MediaUrl] = Field(default_factory=list)
    screenshots: list[MediaUrl] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)
    ageRating: str
    genres: list[Any] = Field(default_factory=list)
    companies: CompanyRoles = Field(default_factory=CompanyRoles)


class PopularGame(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    cover: Optional[MediaUrl] = None
    screenshots: list[MediaUrl] = Field(default_factory=list)


class GenreGame(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    cover: Optional[MediaUrl] = None
