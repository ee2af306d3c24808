from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./quizmaker.db"
    SQL_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # Paging
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 200

    # CORS
    CORS_ORIGINS: List[str] = ["*"]


    class Config:
        env_file = ".env"


settings = Settings()
