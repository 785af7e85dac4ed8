import logging
from http import HTTPStatus
from typing import List
from fastapi import APIRouter, Depends

from filmorate_api.dependencies import get_users_service
from filmorate_api.models.users import User
from filmorate_api.services.users_service import UsersService

log = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[User], status_code=HTTPStatus.OK)
async def list_users(svc: UsersService = Depends(get_users_service)):
    return svc.find_all()


@router.get("/{user_id}", response_model=User, status_code=HTTPStatus.OK)
async def get_user(
    user_id: int,
    svc: UsersService = Depends(get_users_service),
):
    return svc.get(user_id)


@router.post("", response_model=User, status_code=HTTPStatus.OK)
async def add_user(
    user: User,
    svc: UsersService = Depends(get_users_service),
):
    created = svc.add(user)
    log.debug("user_added", extra={"user_id": created.id})
    return created


@router.put("", response_model=User, status_code=HTTPStatus.OK)
async def update_user(
    user: User,
    svc: UsersService = Depends(get_users_service),
):
    updated = svc.update(user)
    log.debug("user_updated", extra={"user_id": updated.id})
    return updated


@router.put(
    "/{user_id}/friends/{friend_id}",
    response_model=List[User],
    status_code=HTTPStatus.OK)
async def add_friend(
    user_id: int,
    friend_id: int,
    svc: UsersService = Depends(get_users_service),
):
    pair = svc.add_friend(user_id, friend_id)
    if not pair:
        # один из пользователей не найден: ничего не меняем
        log.warning("friend_add_skipped",
                    extra={"user_id": user_id, "friend_id": friend_id})
    return pair


@router.delete(
    "/{user_id}/friends/{friend_id}",
    response_model=bool,
    status_code=HTTPStatus.OK)
async def remove_friend(
    user_id: int,
    friend_id: int,
    svc: UsersService = Depends(get_users_service),
) -> bool:
    removed = svc.remove_friend(user_id, friend_id)
    log.debug("friend_removed",
              extra={"user_id": user_id, "friend_id": friend_id,
                     "removed": removed})
    return removed


@router.get(
    "/{user_id}/friends",
    response_model=List[User],
    status_code=HTTPStatus.OK)
async def list_friends(
    user_id: int,
    svc: UsersService = Depends(get_users_service),
):
    return svc.friends_of(user_id)


@router.get(
    "/{user_id}/friends/common/{other_id}",
    response_model=List[User],
    status_code=HTTPStatus.OK)
async def mutual_friends(
    user_id: int,
    other_id: int,
    svc: UsersService = Depends(get_users_service),
):
    return svc.mutual_friends(user_id, other_id)
