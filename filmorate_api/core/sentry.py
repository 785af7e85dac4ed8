import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from filmorate_api.core.config import Settings


def init_sentry(settings: Settings) -> bool:
    """Включает Sentry, если задан DSN. Возвращает, был ли он включён."""
    if not settings.sentry_dsn:
        return False
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.env,
        release=f"{settings.app_name}@{settings.version}",
        integrations=[
            # доменные ошибки логируются warning'ом и в Sentry не нужны
            LoggingIntegration(level=None, event_level=None),
            FastApiIntegration(),
        ],
        traces_sample_rate=settings.sentry_traces_sample_rate,
    )
    return True
