# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import JwtTokenService, WerkzeugPasswordHasher
from .use_cases.movies import (
    CreateMovieUseCase,
    DeleteMovieUseCase,
    GetMovieUseCase,
    ListMoviesUseCase,
    UpdateMovieUseCase,
)
from .use_cases.users import LoginUserUseCase, RegisterUserUseCase

__all__ = [
    "CreateMovieUseCase",
    "DeleteMovieUseCase",
    "GetMovieUseCase",
    "JwtTokenService",
    "ListMoviesUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateMovieUseCase",
    "WerkzeugPasswordHasher",
]
