"""
RAG pipeline configuration settings.

Chunking geometry, retrieval depth and the pacing constants used to stay
under provider rate limits.

Dependencies: pydantic, pydantic_settings
System role: Tuning knobs for indexing and answering
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RAGSettings(BaseSettings):
    """Chunking, retrieval and pacing configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RAG_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(default=1000, ge=1, description="Characters per chunk")
    chunk_overlap: int = Field(
        default=100,
        ge=0,
        description="Overlap between consecutive chunks in characters",
    )
    top_k: int = Field(default=5, ge=1, description="Chunks retrieved per question")

    embedding_batch_size: int = Field(
        default=25,
        ge=1,
        description="Chunks embedded concurrently per batch",
    )
    embedding_batch_delay_ms: int = Field(
        default=1000,
        ge=0,
        description="Pause between embedding batches",
    )
    llm_dispatch_delay_ms: int = Field(
        default=200,
        ge=0,
        description="Stagger between consecutive question dispatches",
    )
    max_llm_input_tokens: int = Field(
        default=30000,
        description="Approximate prompt size above which a warning is logged",
    )

    @model_validator(mode="after")
    def _check_overlap(self) -> "RAGSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than "
                f"chunk_size ({self.chunk_size})"
            )
        return self
