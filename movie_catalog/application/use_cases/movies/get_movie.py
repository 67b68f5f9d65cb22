# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from movie_catalog.domain.movies.entities import Movie
from movie_catalog.domain.movies.exceptions import MovieNotFoundError
from movie_catalog.domain.movies.repositories import MovieRepository


class GetMovieUseCase:
    def __init__(self, *, movies: MovieRepository) -> None:
        self._movies = movies

    def execute(self, movie_id: str) -> Movie:
        movie = self._movies.get(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie
