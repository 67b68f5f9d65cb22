# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .movies import SqlAlchemyMovieRepository
from .users import SqlAlchemyUserRepository

__all__ = ["SqlAlchemyMovieRepository", "SqlAlchemyUserRepository"]
