"""
Observability module.

Provides logging configuration, request logging middleware and log
preview helpers.
"""

from docqa.observability.logger import configure_logging

__all__ = ["configure_logging"]
