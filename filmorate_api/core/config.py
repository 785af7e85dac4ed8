# filmorate_api/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "filmorate"
    version: str = "0.1.0"
    env: str = Field(default="local")
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # popular(count) без count или с count <= 0
    popular_default_count: int = Field(default=10, ge=1)

    sentry_dsn: str = Field(default="", alias="SENTRY_DSN")
    sentry_test_enabled: bool = Field(default=False,
                                      alias="SENTRY_TEST_ENABLED")
    sentry_traces_sample_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    # Pydantic v2: модель конфигурации
    model_config = SettingsConfigDict(env_file="infra/.env", extra="ignore")


settings = Settings()
