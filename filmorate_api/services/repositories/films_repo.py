"""In-memory repository for films."""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from filmorate_api.models.films import Film
from filmorate_api.services.exceptions import ConditionsNotMet, NotFound
from filmorate_api.services.identity import next_id
from filmorate_api.services.validation import check_film

# fields a general update may overwrite
UPDATABLE_FIELDS = ('name', 'description', 'release_date', 'duration')


class FilmsRepo:
    """Owns film records; callers always receive copies."""

    def __init__(self, lock: Optional[threading.RLock] = None) -> None:
        self._films: Dict[int, Film] = {}
        self.lock = lock or threading.RLock()

    def find_all(self) -> List[Film]:
        with self.lock:
            return [
                self._films[film_id].model_copy(deep=True)
                for film_id in sorted(self._films)
            ]

    def find_by_id(self, film_id: int) -> Optional[Film]:
        """Return the film or None; absence is not an error here."""
        with self.lock:
            film = self._films.get(film_id)
            return None if film is None else film.model_copy(deep=True)

    def exists(self, film_id: int) -> bool:
        with self.lock:
            return film_id in self._films

    def add(self, film: Film) -> Film:
        stored = film.model_copy(deep=True)
        check_film(stored)
        with self.lock:
            stored.id = next_id(self._films)
            self._films[stored.id] = stored
            return stored.model_copy(deep=True)

    def update(self, film: Film) -> Film:
        if film.id is None:
            raise ConditionsNotMet('film id is not specified')
        check_film(film)
        with self.lock:
            stored = self._films.get(film.id)
            if stored is None:
                raise NotFound(f'film id={film.id} not found')
            for field in UPDATABLE_FIELDS:
                setattr(stored, field, getattr(film, field))
            return stored.model_copy(deep=True)
