from datetime import date
from itertools import count
from typing import Dict

from filmorate_api.models.films import Film
from filmorate_api.models.users import User

_seq = count(1)


def new_film(**overrides) -> Film:
    data = {
        "name": "Sample",
        "description": "d",
        "release_date": date(2000, 1, 1),
        "duration": 90,
    }
    data.update(overrides)
    return Film(**data)


def new_user(**overrides) -> User:
    n = next(_seq)
    data = {
        "email": f"user{n}@mail.ru",
        "login": f"login{n}",
        "name": f"User {n}",
        "birthday": date(1990, 5, 17),
    }
    data.update(overrides)
    return User(**data)


def film_json(**overrides) -> Dict:
    data = {
        "name": "Sample",
        "description": "d",
        "releaseDate": "2000-01-01",
        "duration": 90,
    }
    data.update(overrides)
    return data


def user_json(**overrides) -> Dict:
    n = next(_seq)
    data = {
        "email": f"user{n}@mail.ru",
        "login": f"login{n}",
        "name": f"User {n}",
        "birthday": "1990-05-17",
    }
    data.update(overrides)
    return data
