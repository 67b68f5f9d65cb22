from __future__ import annotations

from flask.testing import FlaskClient

DUNE = {
    "title": "Dune",
    "releaseDate": "2021-10-22",
    "genre": "Sci-Fi",
    "actors": [{"actorName": "Timothée Chalamet", "characterName": "Paul Atreides"}],
}


def _create(client: FlaskClient, headers: dict[str, str], body: dict | None = None) -> dict:
    response = client.post("/movies", json=body or DUNE, headers=headers)
    assert response.status_code == 201
    return response.get_json()["movie"]


def test_health(client: FlaskClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}


def test_signup_then_signin_issues_jwt(client: FlaskClient) -> None:
    response = client.post("/signup", json={"username": "bob", "password": "hunter2"})
    assert response.status_code == 201
    assert response.get_json()["message"] == "Successfully created new user."

    response = client.post("/signin", json={"username": "bob", "password": "hunter2"})
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["token"].startswith("JWT ")


def test_signup_missing_password_persists_nothing(client: FlaskClient) -> None:
    response = client.post("/signup", json={"username": "bob"})
    assert response.status_code == 400

    response = client.post("/signin", json={"username": "bob", "password": "whatever"})
    assert response.status_code == 401
    assert response.get_json()["error"] == "user_not_found"


def test_duplicate_signup_keeps_original_password(client: FlaskClient) -> None:
    client.post("/signup", json={"username": "bob", "password": "first"})

    response = client.post("/signup", json={"username": "bob", "password": "second"})
    assert response.status_code == 409
    assert response.get_json()["success"] is False

    assert client.post("/signin", json={"username": "bob", "password": "first"}).status_code == 200
    assert client.post("/signin", json={"username": "bob", "password": "second"}).status_code == 401


def test_signin_wrong_password(client: FlaskClient, auth_header: dict[str, str]) -> None:
    response = client.post("/signin", json={"username": "alice", "password": "wrong"})
    assert response.status_code == 401
    assert response.get_json() == {
        "success": False,
        "error": "incorrect_password",
        "message": "Authentication failed. Incorrect password.",
    }


def test_movies_require_token(client: FlaskClient) -> None:
    response = client.get("/movies")
    assert response.status_code == 401
    assert response.get_json()["success"] is False


def test_scheme_is_case_insensitive(client: FlaskClient, auth_header: dict[str, str]) -> None:
    _, _, raw = auth_header["Authorization"].partition(" ")
    response = client.get("/movies", headers={"Authorization": f"jwt {raw}"})
    assert response.status_code == 200


def test_tampered_token_rejected(client: FlaskClient, auth_header: dict[str, str]) -> None:
    head, _, signature = auth_header["Authorization"].rpartition(".")
    flipped = ("B" if signature[0] == "A" else "A") + signature[1:]
    tampered = f"{head}.{flipped}"
    response = client.get("/movies", headers={"Authorization": tampered})
    assert response.status_code == 401
    assert response.get_json()["error"] == "token_invalid"


def test_unsupported_methods_return_405(client: FlaskClient, auth_header: dict[str, str]) -> None:
    for headers in ({}, auth_header):
        for path in ("/movies", "/movies/abc"):
            response = client.patch(path, json={}, headers=headers)
            assert response.status_code == 405
            assert response.get_json()["error"] == "method_not_allowed"
            assert "PATCH" not in response.headers["Allow"]


def test_create_and_fetch_movie(client: FlaskClient, auth_header: dict[str, str]) -> None:
    movie = _create(client, auth_header)
    assert len(movie["id"]) == 32
    assert {k: v for k, v in movie.items() if k != "id"} == DUNE

    response = client.get(f"/movies/{movie['id']}", headers=auth_header)
    assert response.status_code == 200
    assert response.get_json() == {"success": True, "movie": movie}

    listed = client.get("/movies", headers=auth_header).get_json()["movies"]
    assert listed == [movie]


def test_invalid_movie_persists_nothing(client: FlaskClient, auth_header: dict[str, str]) -> None:
    bad_bodies = [
        {**DUNE, "actors": []},
        {**DUNE, "actors": [{"characterName": "Paul"}]},
        {k: v for k, v in DUNE.items() if k != "title"},
    ]
    for body in bad_bodies:
        response = client.post("/movies", json=body, headers=auth_header)
        assert response.status_code == 400

    assert client.get("/movies", headers=auth_header).get_json()["movies"] == []


def test_update_keeps_unsent_fields(client: FlaskClient, auth_header: dict[str, str]) -> None:
    movie = _create(client, auth_header)

    response = client.put(
        f"/movies/{movie['id']}", json={"title": "Dune: Part One"}, headers=auth_header
    )
    assert response.status_code == 200
    updated = response.get_json()["movie"]
    assert updated == {**movie, "title": "Dune: Part One"}

    fetched = client.get(f"/movies/{movie['id']}", headers=auth_header).get_json()["movie"]
    assert fetched == updated


def test_update_with_empty_body_returns_movie(
    client: FlaskClient, auth_header: dict[str, str]
) -> None:
    movie = _create(client, auth_header)
    response = client.put(f"/movies/{movie['id']}", json={}, headers=auth_header)
    assert response.status_code == 200
    assert response.get_json()["movie"] == movie


def test_update_rejects_null_and_empty_cast(
    client: FlaskClient, auth_header: dict[str, str]
) -> None:
    movie = _create(client, auth_header)

    for body in ({"genre": None}, {"actors": []}):
        response = client.put(f"/movies/{movie['id']}", json=body, headers=auth_header)
        assert response.status_code == 400

    fetched = client.get(f"/movies/{movie['id']}", headers=auth_header).get_json()["movie"]
    assert fetched == movie


def test_update_unknown_movie(client: FlaskClient, auth_header: dict[str, str]) -> None:
    response = client.put("/movies/unknown-id", json={"genre": "Drama"}, headers=auth_header)
    assert response.status_code == 404


def test_delete_movie(client: FlaskClient, auth_header: dict[str, str]) -> None:
    movie = _create(client, auth_header)

    response = client.delete(f"/movies/{movie['id']}", headers=auth_header)
    assert response.status_code == 200
    assert response.get_json()["message"] == "Movie deleted successfully"

    response = client.get(f"/movies/{movie['id']}", headers=auth_header)
    assert response.status_code == 404
    assert response.get_json()["message"] == "Movie not found"


def test_delete_unknown_movie(client: FlaskClient, auth_header: dict[str, str]) -> None:
    response = client.delete("/movies/unknown-id", headers=auth_header)
    assert response.status_code == 404


def test_request_id_is_echoed(client: FlaskClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_signin_non_string_password_is_incorrect(
    client: FlaskClient, auth_header: dict[str, str]
) -> None:
    response = client.post("/signin", json={"username": "alice", "password": 5})
    assert response.status_code == 401
    assert response.get_json()["error"] == "incorrect_password"


def test_timestamp_release_date_rejected(
    client: FlaskClient, auth_header: dict[str, str]
) -> None:
    response = client.post(
        "/movies", json={**DUNE, "releaseDate": 1634860800}, headers=auth_header
    )
    assert response.status_code == 400
    assert client.get("/movies", headers=auth_header).get_json()["movies"] == []


def test_title_round_trips_verbatim(client: FlaskClient, auth_header: dict[str, str]) -> None:
    movie = _create(client, auth_header, {**DUNE, "title": "  Dune  "})
    fetched = client.get(f"/movies/{movie['id']}", headers=auth_header).get_json()["movie"]
    assert fetched["title"] == "  Dune  "
