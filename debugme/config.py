from pydantic_settings import BaseSettings
from pathlib import Path


class Settings(BaseSettings):
    # AI tutor (any OpenAI-compatible endpoint)
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    TUTOR_MODEL: str = "gpt-4o-mini"
    TUTOR_TEMPERATURE: float = 0.7
    TUTOR_MAX_TOKENS: int = 2048

    # App
    APP_ENV: str = "development"
    MEMORY_DIR: str = "./data/learners"

    # Career recommendations
    RECOMMENDATION_LIMIT: int = 3

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

# Ensure data dirs exist
Path(settings.MEMORY_DIR).mkdir(parents=True, exist_ok=True)
