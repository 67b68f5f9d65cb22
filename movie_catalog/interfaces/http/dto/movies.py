# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from movie_catalog.domain.movies.entities import Actor, Movie, MovieChanges
from movie_catalog.shared.errors.validation_types import ValidationErrorType

_INPUT_CONFIG = ConfigDict(validate_by_name=True)
_OUTPUT_CONFIG = ConfigDict(validate_by_name=True)

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def _not_blank(value: str | None) -> str | None:
    # text is stored as submitted; only whitespace-only values are refused
    if value is not None and not value.strip():
        raise PydanticCustomError(ValidationErrorType.BLANK, "Value cannot be blank", {})
    return value


def _iso_date(value: object) -> object:
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        raise PydanticCustomError(
            ValidationErrorType.INVALID_DATE,
            "releaseDate must be a YYYY-MM-DD string",
            {},
        )
    return value


class ActorDTO(BaseModel):
    actor_name: str = Field(alias="actorName", min_length=1, max_length=128)
    character_name: str = Field(alias="characterName", min_length=1, max_length=128)

    model_config = _INPUT_CONFIG

    @field_validator("actor_name", "character_name")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        return _not_blank(value)

    def to_domain(self) -> Actor:
        return Actor(actor_name=self.actor_name, character_name=self.character_name)


def _check_actors(value: list[ActorDTO]) -> list[ActorDTO]:
    if not value:
        raise PydanticCustomError(
            ValidationErrorType.ACTORS_EMPTY,
            "Actors array must contain at least one actor",
            {},
        )
    return value


class MovieCreateDTO(BaseModel):
    title: str = Field(min_length=1, max_length=256)
    release_date: date = Field(alias="releaseDate")
    genre: str = Field(min_length=1, max_length=64)
    actors: list[ActorDTO]

    model_config = _INPUT_CONFIG

    @field_validator("title", "genre")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        return _not_blank(value)

    @field_validator("release_date", mode="before")
    @classmethod
    def require_iso_date(cls, value: object) -> object:
        return _iso_date(value)

    @field_validator("actors")
    @classmethod
    def validate_actors(cls, value: list[ActorDTO]) -> list[ActorDTO]:
        return _check_actors(value)

    def to_domain(self) -> Movie:
        return Movie(
            title=self.title,
            release_date=self.release_date,
            genre=self.genre,
            actors=tuple(actor.to_domain() for actor in self.actors),
        )


class MovieUpdateDTO(BaseModel):
    """Partial update body: absent fields keep their stored value, null is rejected."""

    title: str | None = Field(None, min_length=1, max_length=256)
    release_date: date | None = Field(None, alias="releaseDate")
    genre: str | None = Field(None, min_length=1, max_length=64)
    actors: list[ActorDTO] | None = None

    model_config = _INPUT_CONFIG

    @field_validator("title", "genre")
    @classmethod
    def reject_blank(cls, value: str | None) -> str | None:
        return _not_blank(value)

    @field_validator("release_date", mode="before")
    @classmethod
    def require_iso_date(cls, value: object) -> object:
        return _iso_date(value)

    @field_validator("actors")
    @classmethod
    def validate_actors(cls, value: list[ActorDTO] | None) -> list[ActorDTO] | None:
        if value is None:
            return value
        return _check_actors(value)

    @model_validator(mode="after")
    def reject_nulls(self) -> MovieUpdateDTO:
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                field = type(self).model_fields[name]
                raise PydanticCustomError(
                    ValidationErrorType.NULL_NOT_ALLOWED,
                    "{field} cannot be null",
                    {"field": field.alias or name},
                )
        return self

    def to_changes(self) -> MovieChanges:
        return MovieChanges(
            title=self.title,
            release_date=self.release_date,
            genre=self.genre,
            actors=(
                tuple(actor.to_domain() for actor in self.actors)
                if self.actors is not None
                else None
            ),
        )


class ActorOutDTO(BaseModel):
    actor_name: str = Field(alias="actorName")
    character_name: str = Field(alias="characterName")

    model_config = _OUTPUT_CONFIG


class MovieDTO(BaseModel):
    id: str
    title: str
    release_date: date = Field(alias="releaseDate")
    genre: str
    actors: list[ActorOutDTO]

    model_config = _OUTPUT_CONFIG

    @classmethod
    def from_domain(cls, movie: Movie) -> MovieDTO:
        return cls(
            id=movie.id or "",
            title=movie.title,
            release_date=movie.release_date,
            genre=movie.genre,
            actors=[
                ActorOutDTO(actor_name=a.actor_name, character_name=a.character_name)
                for a in movie.actors
            ],
        )


class MovieEnvelopeDTO(BaseModel):
    success: bool = True
    message: str | None = None
    movie: MovieDTO

    model_config = _OUTPUT_CONFIG


class MovieListDTO(BaseModel):
    success: bool = True
    movies: list[MovieDTO]

    model_config = _OUTPUT_CONFIG


class MessageDTO(BaseModel):
    success: bool = True
    message: str
