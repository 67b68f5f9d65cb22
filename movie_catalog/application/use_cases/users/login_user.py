# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from movie_catalog.domain.users.entities import TokenClaim
from movie_catalog.domain.users.exceptions import IncorrectPasswordError, UserNotFoundError
from movie_catalog.domain.users.repositories import PasswordHasher, TokenService, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str | None, password: str | None) -> str:
        user = self._users.find_by_username(username) if username else None
        if user is None:
            raise UserNotFoundError()

        if not self._password_hasher.verify(password or "", user.password_hash):
            raise IncorrectPasswordError()

        return self._tokens.issue(TokenClaim.for_user(user))
