# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from movie_catalog.infrastructure.db import Database
from movie_catalog.shared.logging import logger


class MiscController:
    def __init__(self, *, database: Database) -> None:
        self._database = database

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            self._database.check()
            status["database"] = "ok"
        except Exception as exc:
            logger.warning(f"health: database check failed ({type(exc).__name__}: {exc})")
            status["ok"] = False
            status["database"] = "error"
        return jsonify(status)
