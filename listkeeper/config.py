from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 9000
    log_level: str = "INFO"
    localhost_only: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "LISTKEEPER_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
