"""Field checks for films and users.

Every check runs and all messages are collected, so a caller sees the full
list of problems in one ``ValidationError``.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from filmorate_api.models.films import Film
from filmorate_api.models.users import User
from filmorate_api.services.exceptions import ValidationError

# first public film screening
CINEMA_BIRTHDAY = date(1895, 12, 28)
MAX_DESCRIPTION_LENGTH = 200


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def film_errors(film: Film) -> List[str]:
    """Return constraint violations for a film (empty if valid)."""
    errors: List[str] = []
    if _blank(film.name):
        errors.append('film name is required')
    if _blank(film.description):
        errors.append('film description is required')
    elif len(film.description) > MAX_DESCRIPTION_LENGTH:
        errors.append(
            f'film description exceeds {MAX_DESCRIPTION_LENGTH} characters')
    if film.release_date is None:
        errors.append('film release date is required')
    elif film.release_date < CINEMA_BIRTHDAY:
        errors.append(
            'film release date must not be earlier than '
            f'{CINEMA_BIRTHDAY.isoformat()}')
    if film.duration is None or film.duration <= 0:
        errors.append('film duration must be a positive number of minutes')
    return errors


def check_film(film: Film) -> None:
    errors = film_errors(film)
    if errors:
        raise ValidationError(errors)


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False,
                       globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def user_errors(user: User, today: Optional[date] = None) -> List[str]:
    """Return constraint violations for a user (empty if valid)."""
    today = today or date.today()
    errors: List[str] = []
    if _blank(user.email):
        errors.append('email is required')
    elif not is_valid_email(user.email):
        errors.append('email has an invalid format')
    if _blank(user.login):
        errors.append('login is required')
    if user.birthday is not None and user.birthday > today:
        errors.append('birthday must not be in the future')
    return errors


def check_user(user: User, today: Optional[date] = None) -> None:
    """Validate a user and default a blank display name to the login."""
    errors = user_errors(user, today)
    if errors:
        raise ValidationError(errors)
    if _blank(user.name):
        user.name = user.login
