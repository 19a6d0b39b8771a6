"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_rag_system,
    get_service_cache,
    get_settings_dependency,
)

__all__ = ["get_rag_system", "get_service_cache", "get_settings_dependency"]
