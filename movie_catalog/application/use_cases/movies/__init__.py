# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .create_movie import CreateMovieUseCase
from .delete_movie import DeleteMovieUseCase
from .get_movie import GetMovieUseCase
from .list_movies import ListMoviesUseCase
from .update_movie import UpdateMovieUseCase

__all__ = [
    "CreateMovieUseCase",
    "DeleteMovieUseCase",
    "GetMovieUseCase",
    "ListMoviesUseCase",
    "UpdateMovieUseCase",
]
