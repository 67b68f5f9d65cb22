# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Movie catalog entities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date

from movie_catalog.domain.exceptions import InvariantViolation


def _require_text(value: str, field: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvariantViolation(f"{field} is required", field=field)


@dataclass(slots=True, frozen=True)
class Actor:
    """A cast member and the character they play."""

    actor_name: str
    character_name: str

    def __post_init__(self) -> None:
        _require_text(self.actor_name, "actorName")
        _require_text(self.character_name, "characterName")


@dataclass(slots=True, frozen=True)
class Movie:
    """Movie document; `id` stays None until the repository assigns one."""

    title: str
    release_date: date
    genre: str
    actors: tuple[Actor, ...]
    id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "actors", _as_cast(self.actors))
        _require_text(self.title, "title")
        _require_text(self.genre, "genre")
        if not isinstance(self.release_date, date):
            raise InvariantViolation("releaseDate must be a date", field="releaseDate")

    def apply(self, changes: MovieChanges) -> Movie:
        """Return a copy with every provided field overwritten."""

        if changes.is_empty():
            return self
        return replace(
            self,
            title=changes.title if changes.title is not None else self.title,
            release_date=(
                changes.release_date if changes.release_date is not None else self.release_date
            ),
            genre=changes.genre if changes.genre is not None else self.genre,
            actors=changes.actors if changes.actors is not None else self.actors,
        )


@dataclass(slots=True, frozen=True)
class MovieChanges:
    """Partial update; None means "leave the stored value alone"."""

    title: str | None = None
    release_date: date | None = None
    genre: str | None = None
    actors: tuple[Actor, ...] | None = None

    def __post_init__(self) -> None:
        if self.actors is not None:
            object.__setattr__(self, "actors", _as_cast(self.actors))

    def is_empty(self) -> bool:
        return all(
            value is None for value in (self.title, self.release_date, self.genre, self.actors)
        )


def _as_cast(actors: Iterable[Actor]) -> tuple[Actor, ...]:
    cast = tuple(actors)
    if not cast:
        raise InvariantViolation("actors must contain at least one actor", field="actors")
    return cast
