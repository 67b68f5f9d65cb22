# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from movie_catalog.shared.errors.base import AuthenticationError, DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT
    message = "A user with that username already exists."


class MissingCredentialsError(DomainError):
    code = "missing_credentials"
    message = "Please include both username and password to signup."


class UserNotFoundError(AuthenticationError):
    code = "user_not_found"
    message = "Authentication failed. User not found."


class IncorrectPasswordError(AuthenticationError):
    code = "incorrect_password"
    message = "Authentication failed. Incorrect password."


class MissingTokenError(AuthenticationError):
    code = "missing_token"
    message = "Authorization header with a token is required."


class TokenInvalidError(AuthenticationError):
    code = "token_invalid"
    message = "Token is invalid."


class TokenExpiredError(AuthenticationError):
    code = "token_expired"
    message = "Token has expired."
