"""Configuration settings for the Fact Check List demo."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Content
    CONTENT_FILE: Optional[str] = None  # JSON file overriding the built-in page content
    
    # Environment actions
    START_URL: str = "https://chat.openai.com/"
    STATIC_DIR: str = "static"
    GUIDE_ASSET_PATH: str = "/fact-checklist-pattern-guide.pdf"
    GUIDE_FILENAME: str = "fact-checklist-pattern-guide.pdf"
    
    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8000"  # Comma-separated list
    MAX_SESSIONS_STORED: int = 1000  # Maximum quiz sessions to keep in memory
    DEBUG_MODE: bool = False  # Set to True only in development
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
