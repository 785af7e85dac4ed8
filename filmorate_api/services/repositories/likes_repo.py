"""In-memory like index: film id -> ids of users who liked it."""

from __future__ import annotations

import threading
from typing import Dict, List, Optional, Set, Tuple


class LikesRepo:
    """Set-per-film like storage.

    A film has an entry only while at least one user likes it.
    """

    def __init__(self, lock: Optional[threading.RLock] = None) -> None:
        self._likes: Dict[int, Set[int]] = {}
        self.lock = lock or threading.RLock()

    def has(self, film_id: int, user_id: int) -> bool:
        with self.lock:
            return user_id in self._likes.get(film_id, ())

    def add(self, film_id: int, user_id: int) -> bool:
        """Record a like; False if it was already there."""
        with self.lock:
            likes = self._likes.setdefault(film_id, set())
            if user_id in likes:
                return False
            likes.add(user_id)
            return True

    def remove(self, film_id: int, user_id: int) -> bool:
        """Drop a like; False if there was nothing to drop."""
        with self.lock:
            likes = self._likes.get(film_id)
            if likes is None or user_id not in likes:
                return False
            likes.discard(user_id)
            if not likes:
                del self._likes[film_id]
            return True

    def counts(self) -> List[Tuple[int, int]]:
        """Snapshot of (film_id, like_count) for every liked film."""
        with self.lock:
            return [
                (film_id, len(users))
                for film_id, users in self._likes.items()
            ]
