# faq_service/config.py
import os
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # App Config
    APP_NAME: str = "Multilingual FAQ Service"
    ENVIRONMENT: str = "development"  # "production" turns on secure cookies
    LOG_LEVEL: str = "INFO"

    # Database (SQLite by default, any SQLAlchemy URL works)
    DATABASE_URL: str = f"sqlite:///{os.path.join(os.getcwd(), 'faq.db')}"

    # Redis
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    FAQ_CACHE_TTL_SECONDS: int = 60 * 60 * 24  # 1 day
    REDIS_RETRY_SECONDS: float = 30.0  # reconnect attempt interval while Redis is down

    # JWT
    # IMPORTANT: Load real secrets from env for production
    ACCESS_TOKEN_SECRET: str = "change-this-access-secret"
    REFRESH_TOKEN_SECRET: str = "change-this-refresh-secret"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    # Translation
    TRANSLATION_TIMEOUT_SECONDS: float = 10.0
    SUPPORTED_DETECTION_LANGUAGES: list[str] = ["en", "hi", "fr", "es", "de"]

    # Rate limiting (public read path)
    PUBLIC_RATE_LIMIT: str = "100/minute"
    RATE_LIMIT_ENABLED: bool = True

    @property
    def COOKIE_SECURE(self) -> bool:
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")

settings = Settings()
