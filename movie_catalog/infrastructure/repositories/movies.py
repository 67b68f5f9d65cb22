# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from collections.abc import Callable, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from movie_catalog.domain.movies.entities import Actor, MovieChanges
from movie_catalog.domain.movies.entities import Movie as DomainMovie
from movie_catalog.domain.movies.repositories import MovieRepository
from movie_catalog.infrastructure.db.models import Movie
from movie_catalog.infrastructure.unit_of_work import unit_of_work_scope


def new_document_id() -> str:
    return uuid.uuid4().hex


def _to_domain(row: Movie) -> DomainMovie:
    return DomainMovie(
        id=row.id,
        title=row.title,
        release_date=row.release_date,
        genre=row.genre,
        actors=tuple(
            Actor(actor_name=item["actorName"], character_name=item["characterName"])
            for item in row.actors
        ),
    )


def _actors_document(actors: Sequence[Actor]) -> list[dict[str, str]]:
    return [
        {"actorName": actor.actor_name, "characterName": actor.character_name}
        for actor in actors
    ]


def _write(row: Movie, movie: DomainMovie) -> None:
    row.title = movie.title
    row.release_date = movie.release_date
    row.genre = movie.genre
    row.actors = _actors_document(movie.actors)


class SqlAlchemyMovieRepository(MovieRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[DomainMovie]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(select(Movie).order_by(Movie.created_at.asc())).all()
            return [_to_domain(row) for row in rows]

    def get(self, movie_id: str) -> DomainMovie | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Movie, movie_id)
            return _to_domain(row) if row else None

    def add(self, movie: DomainMovie) -> DomainMovie:
        with unit_of_work_scope(self._session_factory) as session:
            row = Movie(id=new_document_id())
            _write(row, movie)
            session.add(row)
            session.flush()
            return _to_domain(row)

    def update(self, movie_id: str, changes: MovieChanges) -> DomainMovie | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Movie, movie_id)
            if row is None:
                return None
            updated = _to_domain(row).apply(changes)
            _write(row, updated)
            session.flush()
            return updated

    def delete(self, movie_id: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Movie, movie_id)
            if row is None:
                return False
            session.delete(row)
            return True
