from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "DocManager"
    log_level: str = "INFO"

    # первый идентификатор, который выдаст новое хранилище
    id_start: int = 1

    model_config = {"env_file": ".env", "env_prefix": "DOCMANAGER_", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
