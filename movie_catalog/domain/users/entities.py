# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime
    name: str | None = None


@dataclass(slots=True, frozen=True)
class TokenClaim:
    """Identity embedded in a signed bearer token."""

    user_id: int
    username: str

    @classmethod
    def for_user(cls, user: User) -> TokenClaim:
        return cls(user_id=user.id, username=user.username)
