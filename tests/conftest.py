import os
import pytest
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from filmorate_api.core.config import settings
from filmorate_api.db.storage import Storage, reset_storage
from filmorate_api.main import app
from filmorate_api.services.films_service import FilmsService
from filmorate_api.services.users_service import UsersService


@pytest.fixture(scope="session", autouse=True)
def test_env():
    os.environ["SENTRY_DSN"] = ""  # отключаем Sentry
    settings.sentry_dsn = ""


@pytest.fixture(autouse=True)
def clean_storage():
    """Каждый тест начинает с пустого хранилища приложения."""
    reset_storage()
    yield
    reset_storage()


@pytest.fixture
def storage() -> Storage:
    return Storage()


@pytest.fixture
def films_service(storage) -> FilmsService:
    return FilmsService(storage.films, storage.users, storage.likes)


@pytest.fixture
def users_service(storage) -> UsersService:
    return UsersService(storage.users)


@pytest.fixture
async def client():
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport,
                               base_url="http://test") as ac:
            yield ac
