"""Application configuration."""
from typing import List, Optional
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = Field(default="development")

    # Database
    DATABASE_URL: str = Field(...)
    DATABASE_POOL_SIZE: int = Field(default=10)
    DATABASE_MAX_OVERFLOW: int = Field(default=20)

    # Redis (response cache, invalidated by admin changes)
    REDIS_URL: str = Field(...)

    # Weather provider
    WEATHER_PROVIDER: str = Field(default="open_meteo")
    OPEN_METEO_ARCHIVE_URL: str = Field(default="https://archive-api.open-meteo.com/v1/archive")
    WEATHER_REQUEST_TIMEOUT: Optional[float] = Field(default=None)  # seconds, None = requests default

    # Application
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ORIGINS: List[str] = Field(default=["http://localhost:8080", "http://localhost:3000", "http://localhost:5173"])

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
