"""
Amazon S3 Vectors index.

Stores chunk vectors in an S3 Vectors index and keeps the namespace as a
filterable metadata key. The index must be created with the cosine distance
metric, the configured dimension, and "text" declared as a non-filterable
metadata key (chunk text exceeds the filterable metadata size limit).

Dependencies: boto3, botocore, fastapi.concurrency
System role: Production vector index
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool

from docqa.boundary.vdb.base import VectorIndex
from docqa.core.exceptions import VectorIndexError
from docqa.models.vector import VectorPayload, VectorRecord, VectorSearchResult

logger = logging.getLogger(__name__)

NAMESPACE_KEY = "namespace"
MAX_BATCH_SIZE = 500


class S3VectorsIndex(VectorIndex):
    """
    Vector index backed by the boto3 "s3vectors" client.

    All client calls are blocking and run in the thread pool.
    """

    def __init__(
        self,
        vectors_bucket: str,
        index_name: str,
        dimension: int = 768,
        region: str = "us-east-1",
        upsert_batch_size: int = MAX_BATCH_SIZE,
        client: Any = None,
    ) -> None:
        """
        Initialize S3 Vectors index.

        Args:
            vectors_bucket: S3 Vectors bucket name
            index_name: Index within the bucket
            dimension: Vector dimension the index was created with
            region: AWS region of the bucket
            upsert_batch_size: Vectors per put_vectors call (service max 500)
            client: Preconfigured s3vectors client, created lazily when None
        """
        super().__init__(dimension)
        self.vectors_bucket = vectors_bucket
        self.index_name = index_name
        self.region = region
        self.upsert_batch_size = max(1, min(upsert_batch_size, MAX_BATCH_SIZE))
        self._client = client

        logger.info(
            f"{__name__}:__init__ - Configured bucket={vectors_bucket or '<unset>'}, "
            f"index={index_name or '<unset>'}, region={region}"
        )

    def _get_client(self, operation: str) -> Any:
        if not self.vectors_bucket or not self.index_name:
            raise VectorIndexError(
                "Vector index not initialized: bucket and index name are required",
                operation=operation,
            )
        if self._client is None:
            self._client = boto3.client("s3vectors", region_name=self.region)
        return self._client

    def _location(self) -> dict[str, str]:
        return {"vectorBucketName": self.vectors_bucket, "indexName": self.index_name}

    async def upsert(self, namespace: str, records: list[VectorRecord]) -> int:
        if not records:
            return 0
        client = self._get_client("upsert")

        for record in records:
            if len(record.values) != self.dimension:
                raise VectorIndexError(
                    f"Invalid vector dimension. Expected {self.dimension}, got {len(record.values)}",
                    operation="upsert",
                    namespace=namespace,
                )

        entries = [
            {
                "key": record.id,
                "data": {"float32": [float(v) for v in record.values]},
                "metadata": {
                    NAMESPACE_KEY: namespace,
                    "text": record.payload.text,
                    "source_url": record.payload.source_url,
                    "chunk_index": record.payload.chunk_index,
                },
            }
            for record in records
        ]

        written = 0
        for start in range(0, len(entries), self.upsert_batch_size):
            batch = entries[start : start + self.upsert_batch_size]
            try:
                await run_in_threadpool(client.put_vectors, **self._location(), vectors=batch)
            except (ClientError, BotoCoreError) as e:
                logger.error(f"{__name__}:upsert - put_vectors failed after {written} vectors: {e}")
                raise VectorIndexError(
                    "Failed to upsert vectors to S3 Vectors",
                    operation="upsert",
                    namespace=namespace,
                    details={"error": str(e), "written": written, "total": len(entries)},
                ) from e
            written += len(batch)

        logger.info(f"{__name__}:upsert - Upserted {written} vectors into namespace {namespace}")
        return written

    async def search(
        self,
        namespace: str,
        vector: list[float],
        k: int,
    ) -> list[VectorSearchResult]:
        if k < 1:
            return []
        if len(vector) != self.dimension:
            raise VectorIndexError(
                f"Invalid vector dimension. Expected {self.dimension}, got {len(vector)}",
                operation="query",
                namespace=namespace,
            )
        client = self._get_client("query")

        try:
            response = await run_in_threadpool(
                client.query_vectors,
                **self._location(),
                topK=k,
                queryVector={"float32": [float(v) for v in vector]},
                filter={NAMESPACE_KEY: {"$eq": namespace}},
                returnMetadata=True,
                returnDistance=True,
            )
        except (ClientError, BotoCoreError) as e:
            details: dict[str, Any] = {"error": str(e)}
            if isinstance(e, ClientError):
                details["error_code"] = e.response.get("Error", {}).get("Code")
            raise VectorIndexError(
                "Failed to query vectors from S3 Vectors",
                operation="query",
                namespace=namespace,
                details=details,
            ) from e

        euclidean = str(response.get("distanceMetric", "cosine")).lower() == "euclidean"
        results = []
        for match in response.get("vectors", []):
            metadata = match.get("metadata") or {}
            distance = float(match.get("distance", 1.0))
            payload = VectorPayload(
                text=str(metadata.get("text", "")),
                source_url=str(metadata.get("source_url", "")),
                chunk_index=int(metadata.get("chunk_index", 0)),
            )
            results.append(
                VectorSearchResult(
                    id=match["key"],
                    text=payload.text,
                    score=-distance if euclidean else 1.0 - distance,
                    payload=payload,
                )
            )

        # Service order is by distance already; sorting keeps it on equal scores
        results.sort(key=lambda result: result.score, reverse=True)
        return results[:k]

    async def namespace_is_populated(self, namespace: str) -> bool:
        try:
            return await super().namespace_is_populated(namespace)
        except VectorIndexError as e:
            if e.details.get("error_code") == "NotFoundException":
                logger.warning(f"{__name__}:namespace_is_populated - Index does not exist yet")
                return False
            raise

    def probe_vector(self) -> list[float]:
        # A zero vector has no cosine direction and is rejected by the service
        return [1.0] + [0.0] * (self.dimension - 1)

    async def delete_namespace(self, namespace: str) -> int:
        """
        Delete every vector of a namespace.

        S3 Vectors has no delete-by-filter, so keys are collected by listing
        the index and matching the namespace metadata.
        """
        client = self._get_client("delete")

        try:
            keys: list[str] = []
            next_token = None
            while True:
                kwargs: dict[str, Any] = {**self._location(), "returnMetadata": True}
                if next_token:
                    kwargs["nextToken"] = next_token
                page = await run_in_threadpool(client.list_vectors, **kwargs)
                keys.extend(
                    item["key"]
                    for item in page.get("vectors", [])
                    if (item.get("metadata") or {}).get(NAMESPACE_KEY) == namespace
                )
                next_token = page.get("nextToken")
                if not next_token:
                    break

            for start in range(0, len(keys), MAX_BATCH_SIZE):
                await run_in_threadpool(
                    client.delete_vectors,
                    **self._location(),
                    keys=keys[start : start + MAX_BATCH_SIZE],
                )
        except (ClientError, BotoCoreError) as e:
            raise VectorIndexError(
                "Failed to delete vectors from S3 Vectors",
                operation="delete",
                namespace=namespace,
                details={"error": str(e)},
            ) from e

        logger.info(f"{__name__}:delete_namespace - Deleted {len(keys)} vectors from {namespace}")
        return len(keys)
