import logging
import threading
from dataclasses import dataclass, field

from filmorate_api.services.repositories.films_repo import FilmsRepo
from filmorate_api.services.repositories.likes_repo import LikesRepo
from filmorate_api.services.repositories.users_repo import UsersRepo


@dataclass
class Storage:
    """Три in-memory репозитория на одном общем RLock."""

    lock: threading.RLock = field(default_factory=threading.RLock)

    def __post_init__(self) -> None:
        self.films = FilmsRepo(self.lock)
        self.users = UsersRepo(self.lock)
        self.likes = LikesRepo(self.lock)


_storage: Storage | None = None


def get_storage() -> Storage:
    """
    Singleton-хранилище процесса: живёт до выключения приложения.
    """
    global _storage
    if _storage is None:
        _storage = Storage()
        logging.getLogger(__name__).info("storage_initialized")
    return _storage


def reset_storage() -> None:
    global _storage
    _storage = None
