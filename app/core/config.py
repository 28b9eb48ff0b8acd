"""
Application configuration settings.
Loads from environment variables (and an optional .env file) with type checking.
"""

from typing import Optional, List
from pydantic import validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # Application Metadata
    PROJECT_TITLE: str = "Tweeter API"
    PROJECT_DESCRIPTION: str = "Backend API for signing up, posting tweets and following people"
    PROJECT_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"  # or 'testing', 'production'
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Database Configuration
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DATABASE: Optional[str] = None
    # Full URL, overrides the POSTGRES_* parts when set
    DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    # Authentication
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    BCRYPT_ROUNDS: int = 10

    # CORS, comma separated
    BACKEND_CORS_ORIGINS: str = "*"

    @validator("BCRYPT_ROUNDS")
    def validate_bcrypt_rounds(cls, v):
        # bcrypt accepts cost factors 4..31
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @property
    def CORS_ORIGINS(self) -> List[str]:
        return [item.strip() for item in self.BACKEND_CORS_ORIGINS.split(",") if item.strip()]

    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)
        if not (self.POSTGRES_USER and self.POSTGRES_DATABASE):
            raise ValueError("Set DATABASE_URL or POSTGRES_USER and POSTGRES_DATABASE")
        return URL.create(
            "postgresql+asyncpg",
            username=self.POSTGRES_USER,
            password=self.POSTGRES_PASSWORD,
            host=self.POSTGRES_HOST,
            port=self.POSTGRES_PORT,
            database=self.POSTGRES_DATABASE,
        ).render_as_string(hide_password=False)

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"


settings = Settings()
