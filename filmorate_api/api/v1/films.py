import logging
from http import HTTPStatus
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from filmorate_api.dependencies import get_films_service
from filmorate_api.models.films import Film
from filmorate_api.services.films_service import FilmsService

log = logging.getLogger(__name__)

router = APIRouter(prefix="/films", tags=["films"])


@router.get("", response_model=List[Film], status_code=HTTPStatus.OK)
async def list_films(svc: FilmsService = Depends(get_films_service)):
    films = svc.find_all()
    log.debug("films_listed", extra={"count": len(films)})
    return films


@router.get("/popular", response_model=List[Film], status_code=HTTPStatus.OK)
async def popular_films(
    count: Optional[int] = Query(None),
    svc: FilmsService = Depends(get_films_service),
):
    log.debug("popular_requested", extra={"count": count})
    return svc.popular(count)


@router.get("/{film_id}", response_model=Film, status_code=HTTPStatus.OK)
async def get_film(
    film_id: int,
    svc: FilmsService = Depends(get_films_service),
):
    return svc.get(film_id)


@router.post("", response_model=Film, status_code=HTTPStatus.OK)
async def add_film(
    film: Film,
    svc: FilmsService = Depends(get_films_service),
):
    created = svc.add(film)
    log.debug("film_added", extra={"film_id": created.id})
    return created


@router.put("", response_model=Film, status_code=HTTPStatus.OK)
async def update_film(
    film: Film,
    svc: FilmsService = Depends(get_films_service),
):
    updated = svc.update(film)
    log.debug("film_updated", extra={"film_id": updated.id})
    return updated


@router.put("/{film_id}/like/{user_id}", status_code=HTTPStatus.OK)
async def like_film(
    film_id: int,
    user_id: int,
    svc: FilmsService = Depends(get_films_service),
) -> None:
    svc.like(film_id, user_id)
    log.debug("film_liked", extra={"film_id": film_id, "user_id": user_id})


@router.delete("/{film_id}/like/{user_id}", status_code=HTTPStatus.OK)
async def unlike_film(
    film_id: int,
    user_id: int,
    svc: FilmsService = Depends(get_films_service),
) -> None:
    removed = svc.unlike(film_id, user_id)
    log.debug("film_unliked",
              extra={"film_id": film_id, "user_id": user_id,
                     "removed": removed})
