"""
Application configuration using pydantic-settings.
All config is loaded from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "EventHub GraphQL API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    CORS_ORIGINS: list[str] = ["*"]
    GRAPHIQL_ENABLED: bool = True

    # MongoDB
    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "eventhub"

    # JWT Auth
    SECRET_KEY: str = "super-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 1

    # Password hashing cost factor
    BCRYPT_ROUNDS: int = 12

    # Reject bookings/events that reference missing users or events
    ENFORCE_REFERENCES: bool = False

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }

    @property
    def graphiql(self) -> bool:
        return self.GRAPHIQL_ENABLED and self.ENVIRONMENT != "production"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
