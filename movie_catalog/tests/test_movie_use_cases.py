from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import date

import pytest

from movie_catalog.application.use_cases.movies import (
    CreateMovieUseCase,
    DeleteMovieUseCase,
    GetMovieUseCase,
    ListMoviesUseCase,
    UpdateMovieUseCase,
)
from movie_catalog.domain.movies import (
    Actor,
    Movie,
    MovieChanges,
    MovieNotFoundError,
    MovieRepository,
)


class InMemoryMovieRepository(MovieRepository):
    def __init__(self) -> None:
        self._movies: dict[str, Movie] = {}

    def list_all(self) -> Sequence[Movie]:
        return list(self._movies.values())

    def get(self, movie_id: str) -> Movie | None:
        return self._movies.get(movie_id)

    def add(self, movie: Movie) -> Movie:
        stored = replace(movie, id=f"m{len(self._movies) + 1}")
        self._movies[stored.id] = stored
        return stored

    def update(self, movie_id: str, changes: MovieChanges) -> Movie | None:
        movie = self._movies.get(movie_id)
        if movie is None:
            return None
        self._movies[movie_id] = movie.apply(changes)
        return self._movies[movie_id]

    def delete(self, movie_id: str) -> bool:
        return self._movies.pop(movie_id, None) is not None


@pytest.fixture()
def movies() -> InMemoryMovieRepository:
    return InMemoryMovieRepository()


@pytest.fixture()
def dune() -> Movie:
    return Movie(
        title="Dune",
        release_date=date(2021, 10, 22),
        genre="Sci-Fi",
        actors=(Actor(actor_name="Timothée Chalamet", character_name="Paul"),),
    )


def test_create_then_list(movies: InMemoryMovieRepository, dune: Movie) -> None:
    created = CreateMovieUseCase(movies=movies).execute(dune)

    assert created.id == "m1"
    assert ListMoviesUseCase(movies=movies).execute() == [created]


def test_get_unknown_movie_raises(movies: InMemoryMovieRepository) -> None:
    with pytest.raises(MovieNotFoundError) as exc_info:
        GetMovieUseCase(movies=movies).execute("missing")
    assert exc_info.value.status == 404


def test_update_keeps_unsent_fields(movies: InMemoryMovieRepository, dune: Movie) -> None:
    created = CreateMovieUseCase(movies=movies).execute(dune)

    updated = UpdateMovieUseCase(movies=movies).execute(
        created.id, MovieChanges(title="Dune: Part One")
    )

    assert updated.title == "Dune: Part One"
    assert updated.actors == dune.actors
    assert GetMovieUseCase(movies=movies).execute(created.id) == updated


def test_update_unknown_movie_raises(movies: InMemoryMovieRepository) -> None:
    with pytest.raises(MovieNotFoundError):
        UpdateMovieUseCase(movies=movies).execute("missing", MovieChanges(genre="Drama"))


def test_delete_removes_movie(movies: InMemoryMovieRepository, dune: Movie) -> None:
    created = CreateMovieUseCase(movies=movies).execute(dune)
    delete = DeleteMovieUseCase(movies=movies)

    delete.execute(created.id)

    with pytest.raises(MovieNotFoundError):
        delete.execute(created.id)
    assert ListMoviesUseCase(movies=movies).execute() == []
