"""
In-process exact vector index.

Brute-force cosine similarity over numpy matrices, one matrix per namespace.
Suitable for development and single-process deployments; contents live as
long as the instance.

Dependencies: numpy, docqa.boundary.vdb.base
System role: Development vector index (exact, non-persistent)
"""

import logging

import numpy as np

from docqa.boundary.vdb.base import VectorIndex
from docqa.core.exceptions import VectorIndexError
from docqa.models.vector import VectorPayload, VectorRecord, VectorSearchResult

logger = logging.getLogger(__name__)


class _NamespaceEntries:
    """Records of one namespace in insertion order."""

    def __init__(self) -> None:
        self.ids: list[str] = []
        self.vectors: list[np.ndarray] = []
        self.payloads: list[VectorPayload] = []
        self.positions: dict[str, int] = {}
        self._matrix: np.ndarray | None = None

    def put(self, record: VectorRecord) -> None:
        vector = np.asarray(record.values, dtype=np.float64)
        position = self.positions.get(record.id)
        if position is None:
            self.positions[record.id] = len(self.ids)
            self.ids.append(record.id)
            self.vectors.append(vector)
            self.payloads.append(record.payload)
        else:
            # Replace in place so the record keeps its insertion rank
            self.vectors[position] = vector
            self.payloads[position] = record.payload
        self._matrix = None

    @property
    def matrix(self) -> np.ndarray:
        if self._matrix is None:
            self._matrix = np.vstack(self.vectors)
        return self._matrix

    def __len__(self) -> int:
        return len(self.ids)


def cosine_similarities(matrix: np.ndarray, vector: np.ndarray) -> np.ndarray:
    """
    Cosine similarity of every matrix row to a vector.

    Rows or vectors with zero norm score 0.

    Args:
        matrix: (n, d) array of stored vectors
        vector: (d,) query vector

    Returns:
        np.ndarray: (n,) similarities
    """
    dots = matrix @ vector
    denominators = np.linalg.norm(matrix, axis=1) * np.linalg.norm(vector)
    return np.divide(
        dots,
        denominators,
        out=np.zeros_like(dots),
        where=denominators > 0,
    )


class InMemoryVectorIndex(VectorIndex):
    """
    Exact in-process vector index.

    Ranks by cosine similarity with ties broken by insertion order.
    """

    def __init__(self, dimension: int = 768) -> None:
        """
        Initialize an empty index.

        Args:
            dimension: Length every stored and query vector must have
        """
        super().__init__(dimension)
        self._namespaces: dict[str, _NamespaceEntries] = {}
        logger.info(f"{__name__}:__init__ - Initialized with dimension={dimension}")

    def _check_dimension(self, values: list[float], operation: str, namespace: str) -> None:
        if len(values) != self.dimension:
            raise VectorIndexError(
                f"Invalid vector dimension. Expected {self.dimension}, got {len(values)}",
                operation=operation,
                namespace=namespace,
            )

    async def upsert(self, namespace: str, records: list[VectorRecord]) -> int:
        # Validate everything first so a bad record leaves the namespace untouched
        for record in records:
            self._check_dimension(record.values, "upsert", namespace)

        if not records:
            return 0

        entries = self._namespaces.setdefault(namespace, _NamespaceEntries())
        for record in records:
            entries.put(record)

        logger.info(
            f"{__name__}:upsert - Upserted {len(records)} vectors into namespace {namespace}"
        )
        return len(records)

    async def search(
        self,
        namespace: str,
        vector: list[float],
        k: int,
    ) -> list[VectorSearchResult]:
        if k < 1:
            return []
        self._check_dimension(vector, "query", namespace)

        entries = self._namespaces.get(namespace)
        if not entries:
            logger.debug(f"{__name__}:search - Namespace {namespace} is empty")
            return []

        similarities = cosine_similarities(entries.matrix, np.asarray(vector, dtype=np.float64))
        # Stable sort keeps insertion order among equal scores
        order = np.argsort(-similarities, kind="stable")[: min(k, len(entries))]

        return [
            VectorSearchResult(
                id=entries.ids[i],
                text=entries.payloads[i].text,
                score=float(similarities[i]),
                payload=entries.payloads[i],
            )
            for i in order
        ]

    async def namespace_is_populated(self, namespace: str) -> bool:
        return self.count(namespace) > 0

    async def delete_namespace(self, namespace: str) -> int:
        entries = self._namespaces.pop(namespace, None)
        removed = len(entries) if entries else 0
        logger.info(f"{__name__}:delete_namespace - Removed {removed} vectors from {namespace}")
        return removed

    def count(self, namespace: str | None = None) -> int:
        """Number of records in a namespace, or in the whole index when None."""
        if namespace is not None:
            entries = self._namespaces.get(namespace)
            return len(entries) if entries else 0
        return sum(len(entries) for entries in self._namespaces.values())

    def clear(self) -> None:
        """Drop every namespace."""
        self._namespaces.clear()
        logger.info(f"{__name__}:clear - Index cleared")
