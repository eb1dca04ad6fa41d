# course_recommender/settings.py
import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Course Recommender")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # chat model
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = Field(default="gpt-4")
    USE_OLLAMA: bool = Field(default=False)
    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")
    TEMPERATURE: float = Field(default=0.7)
    MAX_TOKENS: int = Field(default=1500)

    # embeddings: "ollama" | "local" | "none"
    EMBED_BACKEND: str = Field(default="ollama")
    EMBED_MODEL: str = Field(default="bge-m3:latest")
    EMBED_WORKERS: int = Field(default=8)
    # set to use the pre-built FAISS index instead of embedding every profile per request
    FAISS_INDEX_PATH: Optional[str] = None
    REQUEST_TIMEOUT: float = Field(default=30.0)

    # profile store: Redis when REDIS_URL is set, the YAML catalog otherwise
    REDIS_URL: Optional[str] = None
    PROFILES_PATH: str = Field(default="data/profiles.yaml")

    # retrieval
    TOP_K: int = Field(default=5)

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
