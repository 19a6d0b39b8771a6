"""
Vector store configuration settings.

Selects the vector index backend (in-process exact index or S3 Vectors)
and holds the embedding dimension shared by every index.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (in-memory for dev, S3 Vectors for prod)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="memory",
        description="Vector store type: 'memory' for in-process, 's3' for S3 Vectors",
    )
    aws_region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")
    vectors_bucket: str = Field(default="", description="S3 Vectors bucket name")
    index_name: str = Field(default="documents", description="S3 Vectors index name")

    embedding_dimension: int = Field(
        default=768,
        ge=1,
        description="Embedding vector dimension requested from the embedding model",
    )
    upsert_batch_size: int = Field(
        default=500,
        ge=1,
        le=500,
        description="Vectors per S3 Vectors PutVectors call (service maximum is 500)",
    )
