import logging

from fastapi import FastAPI

from contextlib import asynccontextmanager
from filmorate_api.db.storage import get_storage

from filmorate_api.core.logger import setup_json_logging, shutdown_logging
from filmorate_api.core.sentry import init_sentry
from filmorate_api.core.config import settings
from filmorate_api.core.middleware import RequestContextMiddleware

from filmorate_api.api.http_utils import register_error_handlers
from filmorate_api.api.v1.films import router as films_router
from filmorate_api.api.v1.users import router as users_router
from filmorate_api.api.v1.debug import include_debug_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 1) логи до всего
    setup_json_logging(service=settings.app_name, level=settings.log_level)
    init_sentry(settings)

    # 2) хранилище создаётся один раз на процесс
    get_storage()

    try:
        yield
    finally:
        shutdown_logging()


app = FastAPI(title="Filmorate", lifespan=lifespan)

# наш trace_id + access JSON
app.add_middleware(RequestContextMiddleware)

# приглушим штатный uvicorn-access, чтобы не было дублей
logging.getLogger("uvicorn.access").setLevel("WARNING")

register_error_handlers(app)
include_debug_routes(app)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(films_router)
app.include_router(users_router)


def run() -> None:
    import uvicorn
    uvicorn.run("filmorate_api.main:app",
                host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
