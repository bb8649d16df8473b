from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Unit Converter"
    debug: bool = True
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    log_level: str = "INFO"
    default_dimension: str = "length"
    slow_request_seconds: float = 1.0

    class Config:
        env_prefix = "CONVERTER_"


settings = Settings()
