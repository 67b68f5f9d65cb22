# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from movie_catalog.domain.movies.exceptions import MovieNotFoundError
from movie_catalog.domain.movies.repositories import MovieRepository


class DeleteMovieUseCase:
    def __init__(self, *, movies: MovieRepository) -> None:
        self._movies = movies

    def execute(self, movie_id: str) -> None:
        if not self._movies.delete(movie_id):
            raise MovieNotFoundError(movie_id)
