"""Request and response models for the movie API."""

from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.services.movie_input import coerce_actors, coerce_release_year


class MovieIn(BaseModel):
    """Body of a create request; every field is optional, nothing is validated."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    actors: list[str] | None = None
    release_year: int | None = Field(default=None, alias="releaseYear")

    @field_validator("title", mode="before")
    @classmethod
    def _title_as_text(cls, value: Any) -> str | None:
        return None if value is None else str(value)

    @field_validator("actors", mode="before")
    @classmethod
    def _actors_as_list(cls, value: Any) -> list[str] | None:
        return coerce_actors(value)

    @field_validator("release_year", mode="before")
    @classmethod
    def _year_as_int(cls, value: Any) -> int | None:
        return coerce_release_year(value)


class MovieUpdate(MovieIn):
    id: str


class MovieDelete(BaseModel):
    id: str


class MovieOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    title: str | None = None
    actors: list[str] | None = None
    release_year: int | None = Field(default=None, alias="releaseYear")

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
