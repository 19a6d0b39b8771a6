"""
API routers.

Exports: health_router, run_router
"""

from docqa.api.routers.health import router as health_router
from docqa.api.routers.run import router as run_router

__all__ = ["health_router", "run_router"]
