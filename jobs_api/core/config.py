from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(Path.cwd() / ".env"),
        case_sensitive=True,
        extra="ignore",
    )

    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_HOST: str = "localhost"
    DB_NAME: str = ""
    DB_PORT: int = 5432
    DB_SSLMODE: str = "require"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DATABASE_URL: Optional[str] = None

    API_HOST: str = "0.0.0.0"
    PORT: int = 10000
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> URL:
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)
        return URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER or None,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME or None,
        )

    @property
    def cors_origins_list(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
