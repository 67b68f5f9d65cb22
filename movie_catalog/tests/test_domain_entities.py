from datetime import date

import pytest

from movie_catalog.domain import InvariantViolation
from movie_catalog.domain.movies import Actor, Movie, MovieChanges


def _movie(**overrides) -> Movie:
    fields = {
        "title": "Dune",
        "release_date": date(2021, 10, 22),
        "genre": "Sci-Fi",
        "actors": [Actor(actor_name="Timothée Chalamet", character_name="Paul")],
    }
    fields.update(overrides)
    return Movie(**fields)


def test_movie_normalises_actors_to_tuple() -> None:
    movie = _movie()
    assert isinstance(movie.actors, tuple)
    assert movie.id is None


def test_movie_requires_at_least_one_actor() -> None:
    with pytest.raises(InvariantViolation) as exc_info:
        _movie(actors=[])
    assert exc_info.value.field == "actors"


@pytest.mark.parametrize("field", ["title", "genre"])
def test_movie_rejects_blank_text(field: str) -> None:
    with pytest.raises(InvariantViolation):
        _movie(**{field: "   "})


def test_movie_rejects_non_date_release() -> None:
    with pytest.raises(InvariantViolation) as exc_info:
        _movie(release_date="2021-10-22")
    assert exc_info.value.field == "releaseDate"


def test_actor_requires_both_names() -> None:
    with pytest.raises(InvariantViolation) as exc_info:
        Actor(actor_name="", character_name="Paul")
    assert exc_info.value.field == "actorName"
    assert exc_info.value.status == 400


def test_apply_overwrites_only_provided_fields() -> None:
    movie = _movie(id="abc")
    updated = movie.apply(MovieChanges(title="Dune: Part One"))

    assert updated.title == "Dune: Part One"
    assert updated.id == "abc"
    assert updated.genre == movie.genre
    assert updated.release_date == movie.release_date
    assert updated.actors == movie.actors


def test_apply_replaces_whole_cast() -> None:
    movie = _movie()
    cast = [Actor(actor_name="Zendaya", character_name="Chani")]
    updated = movie.apply(MovieChanges(actors=cast))
    assert updated.actors == tuple(cast)


def test_empty_changes_are_a_no_op() -> None:
    movie = _movie()
    changes = MovieChanges()
    assert changes.is_empty()
    assert movie.apply(changes) is movie


def test_changes_reject_empty_cast() -> None:
    with pytest.raises(InvariantViolation):
        MovieChanges(actors=[])
