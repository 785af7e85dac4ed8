"""Popularity ranking of films by like count."""

from __future__ import annotations

from typing import List, Optional

from filmorate_api.models.films import Film
from filmorate_api.services.repositories.films_repo import FilmsRepo
from filmorate_api.services.repositories.likes_repo import LikesRepo

DEFAULT_POPULAR_COUNT = 10


class FilmRankingService:
    """Rank liked films: most likes first, ties by ascending film id."""

    def __init__(
            self,
            films: FilmsRepo,
            likes: LikesRepo,
            default_count: int = DEFAULT_POPULAR_COUNT) -> None:
        self.films = films
        self.likes = likes
        self.default_count = default_count

    def normalize_count(self, count: Optional[int]) -> int:
        """None or a non-positive count falls back to the default."""
        if count is None or count <= 0:
            return self.default_count
        return count

    def popular(self, count: Optional[int] = None) -> List[Film]:
        limit = self.normalize_count(count)
        with self.films.lock, self.likes.lock:
            ranked = sorted(
                self.likes.counts(),
                key=lambda item: (-item[1], item[0]),
            )
            result: List[Film] = []
            for film_id, _ in ranked:
                if len(result) == limit:
                    break
                film = self.films.find_by_id(film_id)
                if film is not None:
                    result.append(film)
            return result
