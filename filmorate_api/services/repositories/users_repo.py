"""In-memory repository for users and the friendship graph."""

from __future__ import annotations

import threading
from typing import Dict, List, Optional, Set, Tuple

from filmorate_api.models.users import User
from filmorate_api.services.exceptions import ConditionsNotMet, NotFound
from filmorate_api.services.identity import next_id
from filmorate_api.services.validation import check_user

UPDATABLE_FIELDS = ('email', 'login', 'name', 'birthday')


class UsersRepo:
    """Owns user records and their friend-id sets.

    Friend edges are stored on both endpoints; ``link`` and ``unlink`` change
    both sides under one lock, so the graph is symmetric whenever the lock is
    free.
    """

    def __init__(self, lock: Optional[threading.RLock] = None) -> None:
        self._users: Dict[int, User] = {}
        self.lock = lock or threading.RLock()

    # ---------- READ ----------

    def find_all(self) -> List[User]:
        with self.lock:
            return [
                self._users[user_id].model_copy(deep=True)
                for user_id in sorted(self._users)
            ]

    def find_by_id(self, user_id: int) -> User:
        """Return the user or raise NotFound."""
        with self.lock:
            return self._get(user_id).model_copy(deep=True)

    def exists(self, user_id: int) -> bool:
        with self.lock:
            return user_id in self._users

    def friend_ids(self, user_id: int) -> Set[int]:
        with self.lock:
            return set(self._get(user_id).friends)

    # ---------- CREATE / UPDATE ----------

    def add(self, user: User) -> User:
        stored = user.model_copy(deep=True)
        check_user(stored)
        with self.lock:
            stored.id = next_id(self._users)
            stored.friends = set()
            self._users[stored.id] = stored
            return stored.model_copy(deep=True)

    def update(self, user: User) -> User:
        if user.id is None:
            raise ConditionsNotMet('user id is not specified')
        candidate = user.model_copy(deep=True)
        check_user(candidate)
        with self.lock:
            stored = self._get(user.id)
            for field in UPDATABLE_FIELDS:
                setattr(stored, field, getattr(candidate, field))
            return stored.model_copy(deep=True)

    # ---------- FRIENDSHIP ----------

    def link(self, user_id: int, friend_id: int) -> Tuple[User, User]:
        """Make two existing users friends of each other."""
        if user_id == friend_id:
            raise ConditionsNotMet('a user cannot befriend themselves')
        with self.lock:
            user, friend = self._get(user_id), self._get(friend_id)
            user.friends.add(friend_id)
            friend.friends.add(user_id)
            return user.model_copy(deep=True), friend.model_copy(deep=True)

    def unlink(self, user_id: int, friend_id: int) -> bool:
        """Drop the friendship edge; False if there was none."""
        with self.lock:
            user, friend = self._get(user_id), self._get(friend_id)
            if friend_id not in user.friends:
                return False
            user.friends.discard(friend_id)
            friend.friends.discard(user_id)
            return True

    def _get(self, user_id: int) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise NotFound(f'user id={user_id} not found')
        return user
