from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite:///./getfit.db"

    # без ключа /api/analyze работает в mock-режиме
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o"
    mock_mode: bool = False
    mock_delay_seconds: float = 1.5

    rapidapi_key: Optional[str] = None
    rapidapi_host: str = "exercisedb.p.rapidapi.com"
    exercisedb_base_url: str = "https://exercisedb.p.rapidapi.com"
    musclewiki_base_url: str = "https://musclewiki.com/newapi"
    http_timeout: float = 10.0

    timezone: str = "UTC"
    daily_calorie_target: int = 2000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
