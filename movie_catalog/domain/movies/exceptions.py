# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from movie_catalog.shared.errors.base import DomainError


class MovieNotFoundError(DomainError):
    code = "movie_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Movie not found"

    def __init__(self, movie_id: str) -> None:
        super().__init__(context={"movie_id": movie_id})
