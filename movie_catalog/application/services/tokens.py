# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed bearer tokens (JWT)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from movie_catalog.domain.users.entities import TokenClaim
from movie_catalog.domain.users.exceptions import (
    MissingTokenError,
    TokenExpiredError,
    TokenInvalidError,
)
from movie_catalog.domain.users.repositories import TokenService


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    """Issue and verify HMAC-signed JWTs carrying a :class:`TokenClaim`.

    Issued tokens are returned with the scheme tag already prepended
    (``"JWT eyJ..."``) so clients can send them back verbatim in the
    ``Authorization`` header.
    """

    def __init__(
        self,
        *,
        secret: str,
        scheme: str = "JWT",
        ttl_seconds: int = 3600,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("jwt_secret_blank")
        self._secret = secret
        self._scheme = scheme
        self._ttl = timedelta(seconds=max(1, int(ttl_seconds)))
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, claim: TokenClaim) -> str:
        now = self._clock()
        payload: dict[str, Any] = {
            "id": claim.user_id,
            "username": claim.username,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return f"{self._scheme} {token}"

    def verify(self, token: str) -> TokenClaim:
        if not token:
            raise MissingTokenError()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except jwt.InvalidTokenError as exc:
            raise TokenInvalidError() from exc

        user_id = payload.get("id")
        username = payload.get("username")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise TokenInvalidError(context={"claim": "id"})
        if not isinstance(username, str) or not username:
            raise TokenInvalidError(context={"claim": "username"})
        return TokenClaim(user_id=user_id, username=username)

    def extract(self, authorization: str | None) -> str:
        """Pull the raw token out of an ``Authorization`` header value."""

        if not authorization or not authorization.strip():
            raise MissingTokenError()
        scheme, _, token = authorization.strip().partition(" ")
        if scheme.lower() != self._scheme.lower() or not token.strip():
            raise TokenInvalidError(context={"expected_scheme": self._scheme})
        return token.strip()
