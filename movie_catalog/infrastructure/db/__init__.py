# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import Base, Database, create_db_engine
from . import models  # noqa: F401  (registers tables on Base.metadata)

__all__ = ["Base", "Database", "create_db_engine"]
