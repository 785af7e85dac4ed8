"""Service layer for users and the friendship graph."""

from __future__ import annotations

from typing import List

from filmorate_api.models.users import User
from filmorate_api.services.exceptions import ConditionsNotMet
from filmorate_api.services.repositories.users_repo import UsersRepo


class UsersService:
    """User CRUD and friendship queries.

    Lookup policy differs per operation: ``add_friend`` and
    ``mutual_friends`` treat unknown users as an empty result, while
    ``remove_friend`` and ``friends_of`` raise ``NotFound``.
    """

    def __init__(self, users: UsersRepo) -> None:
        self.users = users

    # ---------- CRUD ----------

    def find_all(self) -> List[User]:
        return self.users.find_all()

    def get(self, user_id: int) -> User:
        return self.users.find_by_id(user_id)

    def add(self, user: User) -> User:
        return self.users.add(user)

    def update(self, user: User) -> User:
        return self.users.update(user)

    # ---------- FRIENDS ----------

    def add_friend(self, user_id: int, friend_id: int) -> List[User]:
        """Befriend two users; returns both records, or [] if either is
        unknown (nothing is changed then)."""
        if user_id == friend_id:
            raise ConditionsNotMet('a user cannot befriend themselves')
        with self.users.lock:
            if not (self.users.exists(user_id)
                    and self.users.exists(friend_id)):
                return []
            return list(self.users.link(user_id, friend_id))

    def remove_friend(self, user_id: int, friend_id: int) -> bool:
        return self.users.unlink(user_id, friend_id)

    def friends_of(self, user_id: int) -> List[User]:
        with self.users.lock:
            return [
                self.users.find_by_id(friend_id)
                for friend_id in sorted(self.users.friend_ids(user_id))
            ]

    def mutual_friends(self, user_id: int, other_id: int) -> List[User]:
        with self.users.lock:
            if not (self.users.exists(user_id)
                    and self.users.exists(other_id)):
                return []
            common = (self.users.friend_ids(user_id)
                      & self.users.friend_ids(other_id))
            return [self.users.find_by_id(i) for i in sorted(common)]
