"""
Domain and API models.

Exports: Chunk, VectorPayload, VectorRecord, VectorSearchResult, IndexingResult,
RunRequest, RunResponse, HealthResponse
"""

from docqa.models.api import HealthResponse, RunRequest, RunResponse
from docqa.models.chunk import Chunk
from docqa.models.vector import IndexingResult, VectorPayload, VectorRecord, VectorSearchResult

__all__ = [
    "Chunk",
    "VectorPayload",
    "VectorRecord",
    "VectorSearchResult",
    "IndexingResult",
    "RunRequest",
    "RunResponse",
    "HealthResponse",
]
