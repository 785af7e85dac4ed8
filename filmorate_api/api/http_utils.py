import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from filmorate_api.models.errors import ErrorResponse
from filmorate_api.services.exceptions import (
    CatalogError, ConditionsNotMet, NotFound, ValidationError,
)

log = logging.getLogger(__name__)

DOMAIN_STATUS: dict[type[CatalogError], HTTPStatus] = {
    ValidationError: HTTPStatus.BAD_REQUEST,
    ConditionsNotMet: HTTPStatus.BAD_REQUEST,
    NotFound: HTTPStatus.NOT_FOUND,
}


def status_for(exc: CatalogError) -> HTTPStatus:
    """Ищем статус по MRO, чтобы подклассы наследовали маппинг."""
    for cls in type(exc).__mro__:
        if cls in DOMAIN_STATUS:
            return DOMAIN_STATUS[cls]
    return HTTPStatus.INTERNAL_SERVER_ERROR


def error_body(status: HTTPStatus, error: str | None = None,
               messages: list[str] | None = None) -> dict:
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=int(status),
        error=error,
        errorMessages=messages,
    )
    return body.model_dump(mode="json", exclude_none=True)


def request_error_messages(exc: RequestValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        # loc = ("body", "releaseDate") -> "releaseDate"
        loc = ".".join(str(p) for p in err.get("loc", ())[1:])
        msg = err.get("msg", "invalid value")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return messages


async def catalog_error_handler(request: Request,
                                exc: CatalogError) -> JSONResponse:
    status = status_for(exc)
    log.warning(
        "domain_error",
        extra={"error_kind": type(exc).__name__, "detail": exc.message,
               "path": request.url.path})
    if isinstance(exc, ValidationError):
        body = error_body(status, messages=exc.errors)
    else:
        body = error_body(status, error=exc.message)
    return JSONResponse(status_code=status, content=body)


async def request_validation_handler(
        request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = request_error_messages(exc)
    log.warning("request_validation_error",
                extra={"errors": messages, "path": request.url.path})
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content=error_body(HTTPStatus.BAD_REQUEST, messages=messages))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError,
                              request_validation_handler)
