# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Movie, MovieChanges


class MovieRepository(Protocol):
    def list_all(self) -> Sequence[Movie]: ...
    def get(self, movie_id: str) -> Movie | None: ...
    def add(self, movie: Movie) -> Movie: ...
    def update(self, movie_id: str, changes: MovieChanges) -> Movie | None: ...
    def delete(self, movie_id: str) -> bool: ...
