# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from movie_catalog.domain.movies.entities import Movie, MovieChanges
from movie_catalog.domain.movies.exceptions import MovieNotFoundError
from movie_catalog.domain.movies.repositories import MovieRepository


class UpdateMovieUseCase:
    """Overwrite the provided fields of a stored movie; absent fields are kept."""

    def __init__(self, *, movies: MovieRepository) -> None:
        self._movies = movies

    def execute(self, movie_id: str, changes: MovieChanges) -> Movie:
        updated = self._movies.update(movie_id, changes)
        if updated is None:
            raise MovieNotFoundError(movie_id)
        return updated
