"""
Unit tests for InMemoryVectorIndex.

System role: Verification of cosine ranking, namespace isolation and upsert semantics
"""

import pytest

from docqa.boundary.vdb.memory_index import InMemoryVectorIndex
from docqa.core.exceptions import VectorIndexError
from docqa.models.vector import VectorPayload, VectorRecord


def make_record(record_id: str, values: list[float], text: str | None = None, index: int = 0) -> VectorRecord:
    return VectorRecord(
        id=record_id,
        values=values,
        payload=VectorPayload(text=text or record_id, source_url="https://x/doc.txt", chunk_index=index),
    )


@pytest.fixture
def index() -> InMemoryVectorIndex:
    return InMemoryVectorIndex(dimension=3)


class TestQuery:
    """Ranking."""

    @pytest.mark.asyncio
    async def test_results_ranked_by_cosine_similarity(self, index) -> None:
        await index.upsert(
            "ns",
            [
                make_record("far", [0.0, 1.0, 0.0]),
                make_record("near", [1.0, 0.1, 0.0]),
                make_record("mid", [1.0, 1.0, 0.0]),
            ],
        )

        results = await index.search("ns", [1.0, 0.0, 0.0], 3)

        assert [r.id for r in results] == ["near", "mid", "far"]
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)
        assert results[2].score == pytest.approx(0.0)

    @pytest.mark.asyncio
    async def test_query_returns_texts(self, index) -> None:
        await index.upsert("ns", [make_record("a", [1.0, 0.0, 0.0], text="alpha")])

        assert await index.query("ns", [2.0, 0.0, 0.0], 5) == ["alpha"]

    @pytest.mark.asyncio
    async def test_magnitude_does_not_matter(self, index) -> None:
        await index.upsert(
            "ns",
            [make_record("long", [10.0, 10.0, 0.0]), make_record("aligned", [0.1, 0.0, 0.0])],
        )

        results = await index.search("ns", [1.0, 0.0, 0.0], 2)

        assert results[0].id == "aligned"

    @pytest.mark.asyncio
    async def test_k_limits_results(self, index) -> None:
        await index.upsert("ns", [make_record(str(i), [1.0, float(i), 0.0]) for i in range(10)])

        assert len(await index.search("ns", [1.0, 0.0, 0.0], 4)) == 4
        assert len(await index.search("ns", [1.0, 0.0, 0.0], 50)) == 10
        assert await index.search("ns", [1.0, 0.0, 0.0], 0) == []

    @pytest.mark.asyncio
    async def test_ties_keep_insertion_order(self, index) -> None:
        await index.upsert(
            "ns",
            [make_record(name, [1.0, 0.0, 0.0]) for name in ("first", "second", "third")],
        )

        assert await index.query("ns", [1.0, 0.0, 0.0], 3) == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_zero_vectors_score_zero(self, index) -> None:
        await index.upsert("ns", [make_record("zero", [0.0, 0.0, 0.0])])

        results = await index.search("ns", [0.0, 0.0, 0.0], 1)

        assert results[0].score == 0.0

    @pytest.mark.asyncio
    async def test_absent_namespace_is_empty(self, index) -> None:
        assert await index.query("missing", [1.0, 0.0, 0.0], 5) == []

    @pytest.mark.asyncio
    async def test_wrong_query_dimension_raises(self, index) -> None:
        with pytest.raises(VectorIndexError):
            await index.search("ns", [1.0, 0.0], 1)


class TestUpsert:
    """Writes."""

    @pytest.mark.asyncio
    async def test_namespaces_are_isolated(self, index) -> None:
        await index.upsert("a", [make_record("a-0", [1.0, 0.0, 0.0])])
        await index.upsert("b", [make_record("b-0", [1.0, 0.0, 0.0])])

        assert await index.query("a", [1.0, 0.0, 0.0], 5) == ["a-0"]
        assert await index.query("b", [1.0, 0.0, 0.0], 5) == ["b-0"]

    @pytest.mark.asyncio
    async def test_same_id_replaces_record(self, index) -> None:
        await index.upsert("ns", [make_record("r", [1.0, 0.0, 0.0], text="old")])
        written = await index.upsert("ns", [make_record("r", [0.0, 1.0, 0.0], text="new")])

        assert written == 1
        assert index.count("ns") == 1
        assert await index.query("ns", [0.0, 1.0, 0.0], 1) == ["new"]

    @pytest.mark.asyncio
    async def test_bad_dimension_rejects_whole_batch(self, index) -> None:
        with pytest.raises(VectorIndexError):
            await index.upsert(
                "ns",
                [make_record("ok", [1.0, 0.0, 0.0]), make_record("bad", [1.0, 0.0])],
            )

        assert index.count("ns") == 0

    @pytest.mark.asyncio
    async def test_empty_upsert_is_noop(self, index) -> None:
        assert await index.upsert("ns", []) == 0
        assert not await index.namespace_is_populated("ns")


class TestLifecycle:
    """Population check, delete and clear."""

    @pytest.mark.asyncio
    async def test_population_follows_writes(self, index) -> None:
        assert not await index.namespace_is_populated("ns")

        await index.upsert("ns", [make_record("r", [1.0, 0.0, 0.0])])

        assert await index.namespace_is_populated("ns")

    @pytest.mark.asyncio
    async def test_delete_namespace(self, index) -> None:
        await index.upsert("ns", [make_record("r1", [1.0, 0.0, 0.0]), make_record("r2", [0.0, 1.0, 0.0])])
        await index.upsert("other", [make_record("o", [1.0, 0.0, 0.0])])

        assert await index.delete_namespace("ns") == 2
        assert await index.delete_namespace("ns") == 0
        assert index.count("other") == 1

    @pytest.mark.asyncio
    async def test_clear_and_count(self, index) -> None:
        await index.upsert("a", [make_record("a", [1.0, 0.0, 0.0])])
        await index.upsert("b", [make_record("b", [1.0, 0.0, 0.0]), make_record("c", [0.0, 0.0, 1.0])])

        assert index.count() == 3

        index.clear()

        assert index.count() == 0


def test_rejects_non_positive_dimension() -> None:
    with pytest.raises(ValueError):
        InMemoryVectorIndex(dimension=0)
