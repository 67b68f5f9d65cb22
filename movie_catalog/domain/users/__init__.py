# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import TokenClaim, User
from .exceptions import (
    IncorrectPasswordError,
    MissingCredentialsError,
    MissingTokenError,
    TokenExpiredError,
    TokenInvalidError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "IncorrectPasswordError",
    "MissingCredentialsError",
    "MissingTokenError",
    "PasswordHasher",
    "TokenClaim",
    "TokenExpiredError",
    "TokenInvalidError",
    "TokenService",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]
