# polyfaq/config.py
import os
from typing import List
from pydantic_settings import BaseSettings

# Directory holding the backend (polyfaq package + scripts)
_BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

class Settings(BaseSettings):
    # App Config
    APP_NAME: str = "Multilingual FAQ API"
    API_PREFIX: str = "/api/faqs"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Database (SQLite by default, any SQLAlchemy URL works)
    DATABASE_URL: str = "sqlite:///" + os.path.join(_BACKEND_DIR, "faqs.db")

    # Redis
    # REDIS_URL wins over the host/port fields when set.
    REDIS_URL: str | None = None
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: str | None = None

    # FAQ list cache
    CACHE_KEY_PREFIX: str = "faqs"
    CACHE_TTL_SECONDS: int = 3600
    # Off by default: new FAQs show up in cached lists only after the TTL.
    CACHE_INVALIDATE_ON_CREATE: bool = False

    # Languages
    DEFAULT_LANGUAGE: str = "en"
    TARGET_LANGUAGES: List[str] = ["hi", "bn"]
    TRANSLATION_SOURCE_LANGUAGE: str = "auto"

    class Config:
        env_file = os.path.join(_BACKEND_DIR, ".env")

settings = Settings()
