"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from docqa.configs.api import APISettings
from docqa.configs.base import BaseSettings
from docqa.configs.gemini import GeminiSettings
from docqa.configs.rag import RAGSettings
from docqa.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    rag: RAGSettings = RAGSettings()
    vector_store: VectorStoreSettings = VectorStoreSettings()
    gemini: GeminiSettings = GeminiSettings()
    api: APISettings = APISettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from docqa.configs import get_settings
        settings = get_settings()
    """
    return Settings()
