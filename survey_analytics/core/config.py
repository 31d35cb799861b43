# survey_analytics/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"

    SERVICE_NAME: str | None = None

    FRONTEND_ORIGIN: str | None = None
    BETTERSTACK_API_KEY: str | None = None  # PRODUCTION MODE ONLY

    RATE_LIMIT: str = "300/minute"
    MAX_TEXTS_PER_REQUEST: int = 5000

    KMEANS_DEFAULT_CLUSTERS: int = 3
    KMEANS_MAX_CLUSTERS: int = 20
    KMEANS_RANDOM_SEED: int | None = None  # None = fresh system entropy

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
