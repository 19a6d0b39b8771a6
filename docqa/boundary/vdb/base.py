"""
Vector index contract.

Every backend stores (vector, payload) records partitioned by namespace and
ranks them by cosine similarity. Backends only have to implement upsert,
search and delete; query and the population check are derived here.

Dependencies: docqa.models.vector
System role: Abstract vector index shared by the in-memory and S3 backends
"""

from abc import ABC, abstractmethod

from docqa.models.vector import VectorRecord, VectorSearchResult


class VectorIndex(ABC):
    """Namespace-partitioned similarity index."""

    def __init__(self, dimension: int) -> None:
        if dimension <= 0:
            raise ValueError(f"dimension must be positive, got {dimension}")
        self.dimension = dimension

    @abstractmethod
    async def upsert(self, namespace: str, records: list[VectorRecord]) -> int:
        """
        Write records under a namespace, replacing records with the same id.

        Args:
            namespace: Partition key
            records: Records to write

        Returns:
            int: Number of records written

        Raises:
            VectorIndexError: Index not initialized or write failed
        """

    @abstractmethod
    async def search(
        self,
        namespace: str,
        vector: list[float],
        k: int,
    ) -> list[VectorSearchResult]:
        """
        Return up to k records of a namespace, most similar first.

        An absent or empty namespace yields an empty list.
        """

    @abstractmethod
    async def delete_namespace(self, namespace: str) -> int:
        """Remove every record of a namespace and return how many were removed."""

    async def query(self, namespace: str, vector: list[float], k: int) -> list[str]:
        """
        Return the payload texts of the top-k records, best match first.

        Args:
            namespace: Partition key
            vector: Query embedding
            k: Maximum number of texts

        Returns:
            list[str]: Chunk texts in non-increasing similarity order
        """
        results = await self.search(namespace, vector, k)
        return [result.text for result in results]

    async def namespace_is_populated(self, namespace: str) -> bool:
        """
        Best-effort check that a namespace holds at least one vector.

        Issues a 1-result probe query. Backends with an authoritative count
        override this; stale replicas or providers rejecting the probe vector
        can make the answer wrong.
        """
        matches = await self.search(namespace, self.probe_vector(), 1)
        return len(matches) > 0

    def probe_vector(self) -> list[float]:
        """Vector used by the population probe."""
        return [0.0] * self.dimension
