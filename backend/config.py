"""Application configuration"""
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API settings
    api_port: int = 8000
    api_host: str = "127.0.0.1"
    cors_origins: List[str] = ["*"]
    log_level: str = "warning"  # Passed straight to uvicorn

    # Rendering settings
    prompt_preview_chars: int = 48  # Prompt caption length inside every template

    # Session history (in-memory only, lost on restart)
    history_max_entries: int = 20
    history_ttl_seconds: int = 1800
    history_max_sessions: int = 1000

    class Config:
        env_file = ".env"

settings = Settings()
