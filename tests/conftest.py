"""
Shared test fixtures and configuration for entire test suite.

Provides: stub embedding models, stub LLM clients, in-memory index and
pipeline builders wired without any network provider.
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock

import pytest
from langchain_core.embeddings import Embeddings

from docqa.boundary.embeddings.gateway import EmbeddingGateway
from docqa.boundary.vdb.memory_index import InMemoryVectorIndex
from docqa.core.answering import AnswerOrchestrator
from docqa.core.chunker import TextChunker
from docqa.core.indexing import IndexingOrchestrator
from docqa.core.rag_system import RAGSystem


class AlternatingEmbeddings(Embeddings):
    """Returns [1, 0] and [0, 1] on alternate calls."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_query(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        return [1.0, 0.0] if len(self.calls) % 2 == 1 else [0.0, 1.0]

    async def aembed_query(self, text: str) -> list[float]:
        return self.embed_query(text)


class KeywordEmbeddings(Embeddings):
    """[1, 0] for text mentioning the sky, [0, 1] for everything else."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_query(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        return [1.0, 0.0] if "sky" in text.lower() else [0.0, 1.0]

    async def aembed_query(self, text: str) -> list[float]:
        return self.embed_query(text)


class EchoLLM:
    """Replies with the prompt it was given."""

    def __init__(self) -> None:
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return prompt


class ScriptedLLM:
    """Replies with a fixed answer and records prompts."""

    def __init__(self, answer: str = "1. Blue.") -> None:
        self.answer = answer
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answer


SKY_TEXT = "The sky is blue. Grass is green."


@pytest.fixture
def memory_index() -> InMemoryVectorIndex:
    """Two-dimensional in-memory index."""
    return InMemoryVectorIndex(dimension=2)


@pytest.fixture
def alternating_embeddings() -> AlternatingEmbeddings:
    return AlternatingEmbeddings()


@pytest.fixture
def keyword_gateway() -> EmbeddingGateway:
    """Gateway over keyword embeddings with no batch delay."""
    return EmbeddingGateway(KeywordEmbeddings(), batch_size=25, batch_delay_s=0)


@pytest.fixture
def sky_fetcher() -> AsyncMock:
    """Fetcher stub returning the sky document."""
    fetcher = AsyncMock()
    fetcher.fetch_text = AsyncMock(return_value=SKY_TEXT)
    return fetcher


@pytest.fixture
def small_chunker() -> TextChunker:
    return TextChunker(chunk_size=20, chunk_overlap=5)


@pytest.fixture
def indexing(sky_fetcher, small_chunker, keyword_gateway, memory_index) -> IndexingOrchestrator:
    return IndexingOrchestrator(
        fetcher=sky_fetcher,
        chunker=small_chunker,
        embedding_gateway=keyword_gateway,
        vector_index=memory_index,
    )


@pytest.fixture
def scripted_llm() -> ScriptedLLM:
    return ScriptedLLM()


@pytest.fixture
def echo_llm() -> EchoLLM:
    return EchoLLM()


@pytest.fixture
def answering(keyword_gateway, memory_index, scripted_llm) -> AnswerOrchestrator:
    return AnswerOrchestrator(
        embedding_gateway=keyword_gateway,
        vector_index=memory_index,
        llm=scripted_llm,
        top_k=5,
        dispatch_delay_s=0,
    )


@pytest.fixture
def rag_system(indexing, answering) -> RAGSystem:
    """RAG facade wired entirely with stubs."""
    return RAGSystem(indexing=indexing, answering=answering)
