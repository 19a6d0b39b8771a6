"""
Dependency injection container.

Factory functions for FastAPI dependencies. Services are built lazily from
settings and cached for the lifetime of the process.

Dependencies: docqa.configs, docqa.core, docqa.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from docqa.configs import Settings, get_settings
from docqa.core.rag_system import RAGSystem


def build_rag_system(settings: Settings, vector_index=None) -> RAGSystem:
    """
    Wire the RAG pipeline from settings.

    Args:
        settings: Application settings
        vector_index: Index to use, built from settings when None

    Returns:
        RAGSystem: Ready-to-use facade
    """
    from docqa.boundary.documents.document_fetcher import HttpDocumentFetcher
    from docqa.boundary.embeddings.embeddings_wrapper import FixedDimensionEmbeddings
    from docqa.boundary.embeddings.gateway import EmbeddingGateway
    from docqa.boundary.llm.gemini_client import GeminiLLMClient
    from docqa.boundary.vdb.vector_index_factory import get_vector_index
    from docqa.core.answering import AnswerOrchestrator
    from docqa.core.chunker import TextChunker
    from docqa.core.indexing import IndexingOrchestrator

    rag = settings.rag
    gemini = settings.gemini
    vector_index = vector_index or get_vector_index(settings)

    embeddings = FixedDimensionEmbeddings(
        model=gemini.embedding_model,
        output_dimensionality=settings.vector_store.embedding_dimension,
        google_api_key=gemini.api_key,
    )
    gateway = EmbeddingGateway(
        embeddings,
        batch_size=rag.embedding_batch_size,
        batch_delay_s=rag.embedding_batch_delay_ms / 1000,
        timeout_s=gemini.embedding_timeout_s,
    )
    llm = GeminiLLMClient(
        model_name=gemini.qna_model,
        api_key=gemini.api_key,
        temperature=gemini.temperature,
        timeout_s=gemini.llm_timeout_s,
    )

    indexing = IndexingOrchestrator(
        fetcher=HttpDocumentFetcher(timeout_s=settings.api.fetch_timeout_s),
        chunker=TextChunker(rag.chunk_size, rag.chunk_overlap),
        embedding_gateway=gateway,
        vector_index=vector_index,
    )
    answering = AnswerOrchestrator(
        embedding_gateway=gateway,
        vector_index=vector_index,
        llm=llm,
        top_k=rag.top_k,
        dispatch_delay_s=rag.llm_dispatch_delay_ms / 1000,
        max_input_tokens=rag.max_llm_input_tokens,
    )
    return RAGSystem(indexing=indexing, answering=answering)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._vector_index = None
        self._rag_system = None

    @property
    def vector_index(self):
        """Get cached vector index."""
        if self._vector_index is None:
            from docqa.boundary.vdb.vector_index_factory import get_vector_index

            self._vector_index = get_vector_index(get_settings())
        return self._vector_index

    @property
    def rag_system(self) -> RAGSystem:
        """Get cached RAG system sharing the cached vector index."""
        if self._rag_system is None:
            self._rag_system = build_rag_system(get_settings(), self.vector_index)
        return self._rag_system

    def clear(self) -> None:
        """Clear all cached instances."""
        self._vector_index = None
        self._rag_system = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_rag_system() -> RAGSystem:
    """Get the cached RAG system."""
    return get_service_cache().rag_system
