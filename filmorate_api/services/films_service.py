"""Service layer for films and their likes."""

from __future__ import annotations

from typing import List, Optional

from filmorate_api.models.films import Film
from filmorate_api.services.exceptions import ConditionsNotMet, NotFound
from filmorate_api.services.film_ranking_service import FilmRankingService
from filmorate_api.services.repositories.films_repo import FilmsRepo
from filmorate_api.services.repositories.likes_repo import LikesRepo
from filmorate_api.services.repositories.users_repo import UsersRepo


class FilmsService:
    """Film CRUD plus likes; checks that liked films and users exist."""

    def __init__(
            self,
            films: FilmsRepo,
            users: UsersRepo,
            likes: LikesRepo,
            ranking: Optional[FilmRankingService] = None) -> None:
        self.films = films
        self.users = users
        self.likes = likes
        self.ranking = ranking or FilmRankingService(films, likes)

    # ---------- CRUD ----------

    def find_all(self) -> List[Film]:
        return self.films.find_all()

    def get(self, film_id: int) -> Film:
        film = self.films.find_by_id(film_id)
        if film is None:
            raise NotFound(f'film id={film_id} not found')
        return film

    def add(self, film: Film) -> Film:
        return self.films.add(film)

    def update(self, film: Film) -> Film:
        return self.films.update(film)

    # ---------- LIKES ----------

    def like(self, film_id: int, user_id: int) -> None:
        """Record that a user likes a film."""
        with self.films.lock, self.users.lock, self.likes.lock:
            self._ensure_exists(film_id, user_id)
            if self.likes.has(film_id, user_id):
                raise ConditionsNotMet(
                    f'user id={user_id} already likes film id={film_id}')
            self.likes.add(film_id, user_id)

    def unlike(self, film_id: int, user_id: int) -> bool:
        """Remove a like. Missing like is a no-op; returns whether one was
        removed."""
        with self.films.lock, self.users.lock, self.likes.lock:
            self._ensure_exists(film_id, user_id)
            return self.likes.remove(film_id, user_id)

    def popular(self, count: Optional[int] = None) -> List[Film]:
        return self.ranking.popular(count)

    def _ensure_exists(self, film_id: int, user_id: int) -> None:
        if not self.films.exists(film_id):
            raise NotFound(f'film id={film_id} not found')
        if not self.users.exists(user_id):
            raise NotFound(f'user id={user_id} not found')
