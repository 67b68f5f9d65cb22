# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Actor, Movie, MovieChanges
from .exceptions import MovieNotFoundError
from .repositories import MovieRepository

__all__ = ["Actor", "Movie", "MovieChanges", "MovieNotFoundError", "MovieRepository"]
