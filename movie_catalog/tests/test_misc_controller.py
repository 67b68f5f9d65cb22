from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

from flask import Flask
from sqlalchemy.exc import OperationalError

from movie_catalog.infrastructure.db import Database
from movie_catalog.interfaces.http.controllers.misc_controller import MiscController


def test_health_hides_database_error_detail() -> None:
    database = MagicMock()
    database.check.side_effect = OperationalError(
        "SELECT 1", {}, Exception("could not connect to db-internal:5432 as app")
    )
    app = Flask(__name__)
    app.register_blueprint(MiscController(database=cast(Database, database)).as_blueprint())

    with app.test_client() as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": False, "database": "error"}
    assert "db-internal" not in response.get_data(as_text=True)
