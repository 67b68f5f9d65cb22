# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from movie_catalog.domain.users.entities import TokenClaim
from movie_catalog.domain.users.repositories import TokenService
from movie_catalog.shared.errors import AuthenticationError
from movie_catalog.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


class AuthenticationGate:
    """Rejects requests without a valid bearer token before the view runs."""

    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def authenticate(self, authorization: str | None) -> TokenClaim:
        token = self._tokens.extract(authorization)
        return self._tokens.verify(token)

    def protect(self, view: F) -> F:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            try:
                claim = self.authenticate(request.headers.get("Authorization"))
            except AuthenticationError as exc:
                logger.warning(
                    f"auth.gate: rejected ({exc.code}) on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise

            g.identity = claim
            g.user_id = claim.user_id
            logger.debug(f"auth.gate: ok user={claim.user_id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return cast(F, inner)


def current_identity() -> TokenClaim:
    """Return the claim attached by :class:`AuthenticationGate`."""
    identity = getattr(g, "identity", None)
    if identity is None:
        raise RuntimeError("current_identity() called outside a protected view")
    return cast(TokenClaim, identity)


__all__ = ["AuthenticationGate", "current_identity"]
