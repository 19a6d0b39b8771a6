"""
Unit tests for IndexingOrchestrator.

Tests the fetch-chunk-embed-upsert pass and the skip-if-populated policy
with stub collaborators and the in-memory index.

System role: Verification of indexing idempotence and record building
"""

from unittest.mock import AsyncMock

import pytest

from docqa.core.exceptions import DocumentFetchError, VectorIndexError
from docqa.core.indexing import IndexingOrchestrator
from docqa.core.namespace import namespace_for_url

SKY_URL = "https://example.com/sky.txt"


@pytest.fixture
def stub_gateway() -> AsyncMock:
    gateway = AsyncMock()
    gateway.embed_many = AsyncMock(return_value=[[1.0, 0.0], [0.0, 1.0]])
    return gateway


class TestEnsureIndexed:
    """Skip-if-populated policy."""

    @pytest.mark.asyncio
    async def test_indexes_new_document(self, indexing, memory_index) -> None:
        namespace = await indexing.ensure_indexed(SKY_URL)

        assert namespace == namespace_for_url(SKY_URL)
        assert memory_index.count(namespace) == 2

    @pytest.mark.asyncio
    async def test_second_call_skips_indexing(self, indexing, sky_fetcher, memory_index) -> None:
        first = await indexing.ensure_indexed(SKY_URL)
        second = await indexing.ensure_indexed(SKY_URL)

        assert first == second
        assert sky_fetcher.fetch_text.await_count == 1
        assert memory_index.count(first) == 2

    @pytest.mark.asyncio
    async def test_other_document_is_indexed_separately(self, indexing, sky_fetcher) -> None:
        await indexing.ensure_indexed(SKY_URL)
        await indexing.ensure_indexed("https://example.com/other.txt")

        assert sky_fetcher.fetch_text.await_count == 2

    @pytest.mark.asyncio
    async def test_zero_valid_vectors_is_retried_next_time(
        self, sky_fetcher, small_chunker, memory_index
    ) -> None:
        gateway = AsyncMock()
        gateway.embed_many = AsyncMock(return_value=[[], []])
        orchestrator = IndexingOrchestrator(sky_fetcher, small_chunker, gateway, memory_index)

        namespace = await orchestrator.ensure_indexed(SKY_URL)
        await orchestrator.ensure_indexed(SKY_URL)

        assert memory_index.count(namespace) == 0
        assert sky_fetcher.fetch_text.await_count == 2

    @pytest.mark.asyncio
    async def test_fetch_failure_aborts(self, indexing, sky_fetcher, memory_index) -> None:
        sky_fetcher.fetch_text.side_effect = DocumentFetchError("down", url=SKY_URL)

        with pytest.raises(DocumentFetchError):
            await indexing.ensure_indexed(SKY_URL)
        assert memory_index.count() == 0

    @pytest.mark.asyncio
    async def test_upsert_failure_aborts(self, sky_fetcher, small_chunker, stub_gateway) -> None:
        index = AsyncMock()
        index.dimension = 2
        index.namespace_is_populated = AsyncMock(return_value=False)
        index.upsert = AsyncMock(side_effect=VectorIndexError("write failed", operation="upsert"))
        orchestrator = IndexingOrchestrator(sky_fetcher, small_chunker, stub_gateway, index)

        with pytest.raises(VectorIndexError):
            await orchestrator.ensure_indexed(SKY_URL)


class TestIndexDocument:
    """Full indexing pass."""

    @pytest.mark.asyncio
    async def test_result_counts(self, indexing) -> None:
        result = await indexing.index_document(SKY_URL)

        assert result.namespace == namespace_for_url(SKY_URL)
        assert result.chunk_count == 2
        assert result.record_count == 2
        assert result.skipped_count == 0
        assert result.processing_time_ms >= 0
        assert set(result.model_dump()) == {
            "namespace",
            "chunk_count",
            "record_count",
            "skipped_count",
            "processing_time_ms",
        }

    @pytest.mark.asyncio
    async def test_records_carry_ids_and_payload(self, indexing, memory_index) -> None:
        await indexing.index_document(SKY_URL)
        namespace = namespace_for_url(SKY_URL)

        results = await memory_index.search(namespace, [1.0, 0.0], 5)

        assert results[0].id == f"{namespace}-chunk-0"
        assert results[0].payload.source_url == SKY_URL
        assert results[0].payload.chunk_index == 0
        assert results[0].text == "The sky is blue. Gra"

    @pytest.mark.asyncio
    async def test_skips_missing_and_wrong_dimension_vectors(
        self, sky_fetcher, small_chunker, memory_index
    ) -> None:
        sky_fetcher.fetch_text.return_value = "The sky is blue. Grass is green. Clouds are white."
        gateway = AsyncMock()
        gateway.embed_many = AsyncMock(return_value=[[1.0, 0.0], [], [0.5, 0.5, 0.5]])
        orchestrator = IndexingOrchestrator(sky_fetcher, small_chunker, gateway, memory_index)

        result = await orchestrator.index_document(SKY_URL)

        assert result.chunk_count == 3
        assert result.record_count == 1
        assert result.skipped_count == 2
        assert memory_index.count(result.namespace) == 1

    @pytest.mark.asyncio
    async def test_empty_document_writes_nothing(self, indexing, sky_fetcher, memory_index) -> None:
        sky_fetcher.fetch_text.return_value = "   "

        result = await indexing.index_document(SKY_URL)

        assert result.chunk_count == 0
        assert result.record_count == 0
        assert memory_index.count() == 0
