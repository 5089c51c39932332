"""
Configuration management using Pydantic Settings.
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    log_level: str = "INFO"
    environment: str = "development"

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_title: str = "Siksha Mantra Assistant API"
    api_version: str = "1.0.0"
    api_description: str = "FastAPI service answering Siksha Mantra chat messages from a static intent/FAQ corpus"
    api_prefix: str = "/api/v1/chatbot"

    # Corpus Configuration
    corpus_path: Optional[str] = None  # JSON file; bundled corpus is used when unset

    # Matcher Configuration (both thresholds are exclusive)
    intent_threshold: float = 0.3
    faq_threshold: float = 0.4
    random_seed: Optional[int] = None

    # Conversation History Configuration
    history_max_messages: int = 10
    history_max_sessions: int = 1000  # least recently used sessions are evicted past this

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
