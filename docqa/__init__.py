"""
Document Q&A service.

Retrieval-augmented question answering over a single document fetched by URL.
"""

__version__ = "0.1.0"
