"""Tests for the in-memory film repository."""

from __future__ import annotations

from datetime import date

import pytest

from filmorate_api.services.exceptions import (
    ConditionsNotMet, NotFound, ValidationError,
)
from filmorate_api.services.repositories.films_repo import FilmsRepo
from tests.helpers import new_film


def test_add_assigns_sequential_ids():
    repo = FilmsRepo()
    assert repo.add(new_film()).id == 1
    assert repo.add(new_film()).id == 2


def test_add_does_not_mutate_caller_object():
    repo = FilmsRepo()
    film = new_film()
    repo.add(film)
    assert film.id is None


def test_add_invalid_film_stores_nothing():
    repo = FilmsRepo()
    with pytest.raises(ValidationError):
        repo.add(new_film(release_date=date(1800, 1, 1)))
    assert repo.find_all() == []


def test_find_by_id_absent_returns_none():
    assert FilmsRepo().find_by_id(42) is None


def test_returned_films_are_copies():
    repo = FilmsRepo()
    created = repo.add(new_film())
    created.name = "changed outside"
    assert repo.find_by_id(created.id).name == "Sample"


def test_update_without_id_raises_conditions_not_met():
    with pytest.raises(ConditionsNotMet):
        FilmsRepo().update(new_film())


def test_update_unknown_id_raises_not_found():
    repo = FilmsRepo()
    repo.add(new_film())
    with pytest.raises(NotFound):
        repo.update(new_film(id=999))


def test_update_validates_before_lookup():
    repo = FilmsRepo()
    with pytest.raises(ValidationError):
        repo.update(new_film(id=999, release_date=date(1895, 12, 27)))


def test_update_replaces_business_fields_and_keeps_id():
    repo = FilmsRepo()
    created = repo.add(new_film())
    updated = repo.update(new_film(
        id=created.id, name="New", description="nd",
        release_date=date(1895, 12, 28), duration=120))
    assert updated.id == created.id
    assert repo.find_by_id(created.id).model_dump() == updated.model_dump()
    assert (updated.name, updated.duration) == ("New", 120)


def test_find_all_returns_every_film():
    repo = FilmsRepo()
    for i in range(3):
        repo.add(new_film(name=f"f{i}"))
    assert [f.name for f in repo.find_all()] == ["f0", "f1", "f2"]
