from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask, jsonify

from movie_catalog.application.services.tokens import JwtTokenService
from movie_catalog.domain.users.entities import TokenClaim
from movie_catalog.infrastructure.auth import AuthenticationGate, current_identity
from movie_catalog.shared.middleware.error_handler import configure_error_handling

SECRET = "gate-test-secret-0123456789abcdef0123456789"


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(secret=SECRET)


@pytest.fixture()
def calls() -> list[TokenClaim]:
    return []


@pytest.fixture()
def flask_app(tokens: JwtTokenService, calls: list[TokenClaim]) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    gate = AuthenticationGate(tokens=tokens)

    def whoami():
        identity = current_identity()
        calls.append(identity)
        return jsonify({"id": identity.user_id, "username": identity.username})

    app.add_url_rule("/whoami", view_func=gate.protect(whoami), methods=["GET"])
    return app


def test_valid_token_attaches_identity(
    flask_app: Flask, tokens: JwtTokenService, calls: list[TokenClaim]
) -> None:
    header = tokens.issue(TokenClaim(user_id=3, username="carol"))

    with flask_app.test_client() as client:
        response = client.get("/whoami", headers={"Authorization": header})

    assert response.status_code == 200
    assert response.get_json() == {"id": 3, "username": "carol"}
    assert calls == [TokenClaim(user_id=3, username="carol")]


def test_missing_header_short_circuits(flask_app: Flask, calls: list[TokenClaim]) -> None:
    with flask_app.test_client() as client:
        response = client.get("/whoami")

    assert response.status_code == 401
    assert response.get_json()["error"] == "missing_token"
    assert calls == []


def test_expired_token_short_circuits(flask_app: Flask, calls: list[TokenClaim]) -> None:
    past = datetime.now(UTC) - timedelta(hours=2)
    header = JwtTokenService(secret=SECRET, clock=lambda: past).issue(
        TokenClaim(user_id=3, username="carol")
    )

    with flask_app.test_client() as client:
        response = client.get("/whoami", headers={"Authorization": header})

    assert response.status_code == 401
    assert response.get_json()["error"] == "token_expired"
    assert calls == []


@pytest.mark.parametrize(
    "header",
    [
        "JWT not.a.token",
        "Bearer something",
        "JWT",
    ],
)
def test_malformed_header_short_circuits(
    flask_app: Flask, calls: list[TokenClaim], header: str
) -> None:
    with flask_app.test_client() as client:
        response = client.get("/whoami", headers={"Authorization": header})

    assert response.status_code == 401
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"] == "token_invalid"
    assert calls == []


def test_current_identity_outside_protected_view() -> None:
    app = Flask(__name__)
    with app.test_request_context("/"):
        with pytest.raises(RuntimeError):
            current_identity()
