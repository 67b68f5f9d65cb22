# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from movie_catalog.domain.movies.entities import Movie
from movie_catalog.domain.movies.repositories import MovieRepository


class CreateMovieUseCase:
    def __init__(self, *, movies: MovieRepository) -> None:
        self._movies = movies

    def execute(self, movie: Movie) -> Movie:
        return self._movies.add(movie)
