from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from movie_catalog.app import create_app
from movie_catalog.shared.config import AppConfig, DatabaseConfig

TEST_SECRET = "test-secret-key-0123456789abcdef0123456789"


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        app_env="test",
        secret_key=TEST_SECRET,
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'movies.db'}"),
    )


@pytest.fixture()
def app(config: AppConfig) -> Iterator[Flask]:
    app = create_app(config)
    app.config.update(TESTING=True)
    yield app
    app.extensions["container"].database.dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def auth_header(client: FlaskClient) -> dict[str, str]:
    client.post("/signup", json={"name": "Alice", "username": "alice", "password": "secret123"})
    response = client.post("/signin", json={"username": "alice", "password": "secret123"})
    assert response.status_code == 200
    return {"Authorization": response.get_json()["token"]}
