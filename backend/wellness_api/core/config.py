# 환경변수 로딩 (.env)
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    GEMINI_API_KEY: str | None = None  # 텍스트 생성 라우트에서만 필요
    LLM_MODEL: str = "gemini-1.5-flash"
    LLM_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta/openai/"

    MEALDB_BASE_URL: str = "https://www.themealdb.com/api/json/v1/1"
    RECIPE_CATEGORY: str = "Vegetarian"
    HTTP_TIMEOUT: float = 20.0

    HOST: str = "0.0.0.0"
    PORT: int = 3001
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

@lru_cache
def get_settings() -> Settings:
    return Settings()
