"""
Vector index schemas.

Pydantic models for vector records, search results and indexing outcomes.
Used for type-safe vector index interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field


class VectorPayload(BaseModel):
    """
    Payload stored next to each vector.

    The namespace is not part of the payload; backends keep it as the
    partition key (a dict key in memory, a filterable metadata key in S3).
    """

    text: str = Field(description="Chunk text returned by retrieval")
    source_url: str = Field(description="URL of the document the chunk came from")
    chunk_index: int = Field(ge=0, description="Position of the chunk in the document")


class VectorRecord(BaseModel):
    """Vector with its identifier and payload."""

    id: str = Field(description="Deterministic record identifier")
    values: list[float] = Field(description="Embedding vector")
    payload: VectorPayload


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    id: str = Field(description="Record identifier")
    text: str = Field(description="Chunk text content")
    score: float = Field(description="Cosine similarity to the query vector")
    payload: VectorPayload


class IndexingResult(BaseModel):
    """Outcome of a full indexing pass."""

    namespace: str = Field(description="Namespace derived from the document URL")
    chunk_count: int = Field(default=0, description="Chunks produced from the document")
    record_count: int = Field(default=0, description="Vectors written to the index")
    skipped_count: int = Field(default=0, description="Chunks dropped for missing/invalid embeddings")
    processing_time_ms: float = Field(default=0.0, description="Wall time of the pass")
