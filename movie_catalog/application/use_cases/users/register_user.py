# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from movie_catalog.domain.users.entities import User
from movie_catalog.domain.users.exceptions import MissingCredentialsError, UserAlreadyExistsError
from movie_catalog.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str, name: str | None = None) -> User:
        if not username or not password:
            raise MissingCredentialsError()
        existing = self._users.find_by_username(username)
        if existing:
            raise UserAlreadyExistsError()
        now = datetime.now(UTC)
        hashed = self._password_hasher.hash(password)
        user = User(id=0, username=username, password_hash=hashed, created_at=now, name=name)
        return self._users.add(user)
