from typing import List

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "Academic Records API"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    LOG_DIR: str = "logs"
    STORAGE_BACKEND: str = "json"
    DATA_DIR: str = "data"
    DATABASE_URL: str = "sqlite+aiosqlite:///./records.db"
    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://127.0.0.1:8000",
    ]

    class Config:
        case_sensitive = True


settings = Settings()
