# ftskit/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"

    SERVICE_NAME: str | None = None

    DATABASE_URL: str = "sqlite://"  # in-memory unless overridden
    DB_CONNECT_RETRIES: int = 10
    DB_CONNECT_DELAY_SECONDS: float = 3.0

    MAX_INPUT_LENGTH: int = 100_000
    TOKENIZE_RATE_LIMIT: str = "120/minute"

    FRONTEND_ORIGIN: str | None = None
    BETTERSTACK_API_KEY: str | None = None  # PRODUCTION MODE ONLY
    BETTERSTACK_HOST: str | None = None  # PRODUCTION MODE ONLY

    OTEL_SERVICE_NAME: str | None = None
    OTEL_SERVICE_VERSION: str | None = None
    OTEL_EXPORTER_OTLP_ENDPOINT: str | None = None
    OTEL_SAMPLE_RATIO: str | None = None
    OTEL_ENABLE_METRICS: str | None = None

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
