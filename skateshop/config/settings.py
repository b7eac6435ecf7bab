"""
Configuration settings for the Skateshop backend
Loads from .env file
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    # Environment
    environment: str = "development"
    debug: bool = True

    # Database
    database_url: str = "sqlite:///./skateshop.db"

    # Google Cloud Storage (image uploads)
    gcs_bucket: str = "skateshop-uploads"
    gcs_public_base_url: str = "https://storage.googleapis.com"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields in .env file


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
