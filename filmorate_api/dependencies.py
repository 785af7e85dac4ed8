from fastapi import Depends
from filmorate_api.core.config import settings
from filmorate_api.db.storage import Storage, get_storage
from filmorate_api.services.film_ranking_service import FilmRankingService
from filmorate_api.services.films_service import FilmsService
from filmorate_api.services.users_service import UsersService


def get_store() -> Storage:
    # единая точка доступа к in-memory хранилищу
    return get_storage()


def get_ranking_service(
        store: Storage = Depends(get_store),
) -> FilmRankingService:
    return FilmRankingService(
        store.films, store.likes,
        default_count=settings.popular_default_count)


def get_films_service(
        store: Storage = Depends(get_store),
        ranking: FilmRankingService = Depends(get_ranking_service),
) -> FilmsService:
    return FilmsService(store.films, store.users, store.likes, ranking)


def get_users_service(store: Storage = Depends(get_store)) -> UsersService:
    return UsersService(store.users)
