from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Location Service"
    MONGO_PUBLIC_URL: str
    DATABASE_NAME: str = "test"
    COLLECTION_NAME: str = "locations"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    REQUEST_TIMEOUT_SECONDS: float = 10.0
    SERVER_SELECTION_TIMEOUT_MS: int = 5000

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings instance.

    Raises pydantic's ValidationError when MONGO_PUBLIC_URL is not set.
    """
    return Settings()
