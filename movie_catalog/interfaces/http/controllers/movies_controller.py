# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from time import perf_counter

from flask import Blueprint, Response, jsonify
from pydantic import BaseModel, ValidationError

from movie_catalog.application.use_cases.movies import (
    CreateMovieUseCase,
    DeleteMovieUseCase,
    GetMovieUseCase,
    ListMoviesUseCase,
    UpdateMovieUseCase,
)
from movie_catalog.infrastructure.auth import AuthenticationGate, current_identity
from movie_catalog.interfaces.http.dto.movies import (
    MessageDTO,
    MovieCreateDTO,
    MovieDTO,
    MovieEnvelopeDTO,
    MovieListDTO,
    MovieUpdateDTO,
)
from movie_catalog.interfaces.http.payload import request_payload
from movie_catalog.shared.errors import AppError, InfrastructureError
from movie_catalog.shared.errors.validation import raise_validation_error
from movie_catalog.shared.logging import logger


def _json(dto: BaseModel, status: HTTPStatus = HTTPStatus.OK) -> tuple[Response, int]:
    return jsonify(dto.model_dump(mode="json", by_alias=True, exclude_none=True)), status


class MoviesController:
    def __init__(
        self,
        *,
        gate: AuthenticationGate,
        list_movies: ListMoviesUseCase,
        create_movie: CreateMovieUseCase,
        get_movie: GetMovieUseCase,
        update_movie: UpdateMovieUseCase,
        delete_movie: DeleteMovieUseCase,
    ) -> None:
        self._gate = gate
        self._list_movies = list_movies
        self._create_movie = create_movie
        self._get_movie = get_movie
        self._update_movie = update_movie
        self._delete_movie = delete_movie

    def list_movies(self) -> tuple[Response, int]:
        t0 = perf_counter()
        user_id = current_identity().user_id
        try:
            movies = self._list_movies.execute()
        except Exception as exc:
            logger.exception(f"movies.list: err (user_id={user_id})")
            raise InfrastructureError(
                code="movies_list_failed", message="Server error retrieving movies"
            ) from exc

        dt = (perf_counter() - t0) * 1000
        logger.info(f"movies.list: ok (user_id={user_id}, n={len(movies)}, dt_ms={dt:.0f})")
        return _json(MovieListDTO(movies=[MovieDTO.from_domain(m) for m in movies]))

    def create(self) -> tuple[Response, int]:
        user_id = current_identity().user_id
        try:
            dto = MovieCreateDTO.model_validate(request_payload())
        except ValidationError as exc:
            logger.info(f"movie.create: invalid payload (user_id={user_id})")
            raise_validation_error(
                exc, message="Missing required fields or actors array is empty"
            )

        try:
            movie = self._create_movie.execute(dto.to_domain())
        except AppError:
            raise
        except Exception as exc:
            logger.exception(f"movie.create: err (user_id={user_id})")
            raise InfrastructureError(
                code="movie_create_failed", message="Server error creating movie"
            ) from exc

        logger.info(f"movie.create: ok (user_id={user_id}, movie_id={movie.id})")
        return _json(
            MovieEnvelopeDTO(
                message="Movie created successfully", movie=MovieDTO.from_domain(movie)
            ),
            HTTPStatus.CREATED,
        )

    def retrieve(self, movie_id: str) -> tuple[Response, int]:
        try:
            movie = self._get_movie.execute(movie_id)
        except AppError:
            logger.info(f"movie.get: not_found (movie_id={movie_id})")
            raise
        except Exception as exc:
            logger.exception(f"movie.get: err (movie_id={movie_id})")
            raise InfrastructureError(
                code="movie_get_failed", message="Server error retrieving movie"
            ) from exc

        return _json(MovieEnvelopeDTO(movie=MovieDTO.from_domain(movie)))

    def update(self, movie_id: str) -> tuple[Response, int]:
        user_id = current_identity().user_id
        try:
            dto = MovieUpdateDTO.model_validate(request_payload())
        except ValidationError as exc:
            logger.info(f"movie.update: invalid payload (user_id={user_id}, movie_id={movie_id})")
            raise_validation_error(exc)

        try:
            movie = self._update_movie.execute(movie_id, dto.to_changes())
        except AppError as exc:
            logger.info(f"movie.update: rejected ({exc.code}) (movie_id={movie_id})")
            raise
        except Exception as exc:
            logger.exception(f"movie.update: err (user_id={user_id}, movie_id={movie_id})")
            raise InfrastructureError(
                code="movie_update_failed", message="Server error updating movie"
            ) from exc

        logger.info(
            f"movie.update: ok (user_id={user_id}, movie_id={movie_id}, "
            f"fields={sorted(dto.model_fields_set)})"
        )
        return _json(
            MovieEnvelopeDTO(
                message="Movie updated successfully", movie=MovieDTO.from_domain(movie)
            )
        )

    def delete(self, movie_id: str) -> tuple[Response, int]:
        user_id = current_identity().user_id
        try:
            self._delete_movie.execute(movie_id)
        except AppError:
            logger.info(f"movie.delete: not_found (movie_id={movie_id})")
            raise
        except Exception as exc:
            logger.exception(f"movie.delete: err (user_id={user_id}, movie_id={movie_id})")
            raise InfrastructureError(
                code="movie_delete_failed", message="Server error deleting movie"
            ) from exc

        logger.info(f"movie.delete: ok (user_id={user_id}, movie_id={movie_id})")
        return _json(MessageDTO(message="Movie deleted successfully"))

    def as_blueprint(self) -> Blueprint:
        protect = self._gate.protect
        bp = Blueprint("movies", __name__)
        bp.add_url_rule("/movies", view_func=protect(self.list_movies), methods=["GET"])
        bp.add_url_rule("/movies", view_func=protect(self.create), methods=["POST"])
        bp.add_url_rule(
            "/movies/<movie_id>", view_func=protect(self.retrieve), methods=["GET"]
        )
        bp.add_url_rule(
            "/movies/<movie_id>", view_func=protect(self.update), methods=["PUT"]
        )
        bp.add_url_rule(
            "/movies/<movie_id>", view_func=protect(self.delete), methods=["DELETE"]
        )
        return bp
