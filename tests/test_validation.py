"""Tests for film and user field checks."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from filmorate_api.services.exceptions import ValidationError
from filmorate_api.services.validation import (
    CINEMA_BIRTHDAY, check_film, check_user, film_errors, user_errors,
)
from tests.helpers import new_film, new_user


def test_valid_film_has_no_errors():
    assert film_errors(new_film()) == []


def test_release_date_boundary_is_inclusive():
    check_film(new_film(release_date=CINEMA_BIRTHDAY))


def test_release_date_day_before_boundary_rejected():
    with pytest.raises(ValidationError) as e:
        check_film(new_film(release_date=date(1895, 12, 27)))
    assert len(e.value.errors) == 1
    assert "1895-12-28" in e.value.errors[0]


def test_description_of_200_chars_is_allowed():
    assert film_errors(new_film(description="x" * 200)) == []


def test_description_over_200_chars_rejected():
    assert len(film_errors(new_film(description="x" * 201))) == 1


@pytest.mark.parametrize("duration", [0, -5, None])
def test_non_positive_or_missing_duration_rejected(duration):
    assert len(film_errors(new_film(duration=duration))) == 1


def test_all_film_errors_are_collected():
    film = new_film(name=" ", description="", release_date=None, duration=0)
    with pytest.raises(ValidationError) as e:
        check_film(film)
    assert len(e.value.errors) == 4


@pytest.mark.parametrize("email", [
    "neo@mail.ru", "neo@localhost", "neo@matrix.test",
    "neo@host.local", "neo@corp.internal",
])
def test_syntactically_valid_email_accepted(email):
    assert user_errors(new_user(email=email)) == []


@pytest.mark.parametrize("email", ["", "   ", "no-at-sign", "a@", "@mail.ru"])
def test_bad_email_rejected(email):
    assert user_errors(new_user(email=email))


def test_blank_login_rejected():
    assert user_errors(new_user(login="  ")) == ["login is required"]


def test_birthday_today_allowed_tomorrow_rejected():
    today = date(2024, 3, 1)
    assert user_errors(new_user(birthday=today), today=today) == []
    assert user_errors(
        new_user(birthday=today + timedelta(days=1)), today=today) == [
        "birthday must not be in the future"]


def test_missing_birthday_is_allowed():
    assert user_errors(new_user(birthday=None)) == []


@pytest.mark.parametrize("name", [None, "", "   "])
def test_blank_name_defaults_to_login(name):
    user = new_user(name=name, login="neo")
    check_user(user)
    assert user.name == "neo"


def test_invalid_user_keeps_name_untouched():
    user = new_user(name="", email="broken")
    with pytest.raises(ValidationError):
        check_user(user)
    assert user.name == ""
