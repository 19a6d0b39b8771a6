"""
Indexing orchestrator.

Makes sure a document's vectors exist before questions are answered:
fetch, chunk, embed, upsert. Runs at most once per populated namespace.

Dependencies: docqa.boundary, docqa.core.chunker, docqa.core.namespace
System role: Indexing pass of the RAG pipeline
"""

import logging
import time

from docqa.boundary.documents.document_fetcher import HttpDocumentFetcher
from docqa.boundary.embeddings.gateway import EmbeddingGateway
from docqa.boundary.vdb.base import VectorIndex
from docqa.core.chunker import TextChunker
from docqa.core.namespace import namespace_for_url, record_id
from docqa.models.chunk import Chunk
from docqa.models.vector import IndexingResult, VectorPayload, VectorRecord

logger = logging.getLogger(__name__)


class IndexingOrchestrator:
    """Fetch-chunk-embed-upsert pipeline for a single document."""

    def __init__(
        self,
        fetcher: HttpDocumentFetcher,
        chunker: TextChunker,
        embedding_gateway: EmbeddingGateway,
        vector_index: VectorIndex,
    ) -> None:
        self._fetcher = fetcher
        self._chunker = chunker
        self._embedding_gateway = embedding_gateway
        self._vector_index = vector_index

    async def ensure_indexed(self, document_url: str) -> str:
        """
        Index a document unless its namespace is already populated.

        Args:
            document_url: Absolute document URL

        Returns:
            str: Namespace of the document

        Raises:
            DocumentFetchError: Download failed
            UnsupportedTypeError: Document type not supported
            VectorIndexError: Population check or upsert failed
        """
        namespace = namespace_for_url(document_url)

        if await self._vector_index.namespace_is_populated(namespace):
            logger.info(f"{__name__}:ensure_indexed - Namespace {namespace} already indexed")
            return namespace

        await self.index_document(document_url, namespace)
        return namespace

    async def index_document(
        self,
        document_url: str,
        namespace: str | None = None,
    ) -> IndexingResult:
        """
        Run the full indexing pass for a document, without the population check.

        Args:
            document_url: Absolute document URL
            namespace: Target namespace, derived from the URL when None

        Returns:
            IndexingResult: Counts and timing of the pass
        """
        namespace = namespace or namespace_for_url(document_url)
        start_time = time.perf_counter()
        logger.info(f"{__name__}:index_document - Indexing {document_url} into {namespace}")

        text = await self._fetcher.fetch_text(document_url)
        chunks = self._chunker.chunk_document(text)
        logger.info(f"{__name__}:index_document - Created {len(chunks)} chunks")

        vectors = await self._embedding_gateway.embed_many([chunk.text for chunk in chunks])
        records = self._build_records(namespace, document_url, chunks, vectors)

        written = 0
        if records:
            written = await self._vector_index.upsert(namespace, records)
        else:
            # Nothing was stored, so the next request will attempt indexing again
            logger.warning(
                f"{__name__}:index_document - No valid vectors for {document_url}; "
                f"namespace {namespace} stays empty"
            )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:index_document - Indexed {written}/{len(chunks)} chunks "
            f"in {elapsed_ms:.0f}ms"
        )
        return IndexingResult(
            namespace=namespace,
            chunk_count=len(chunks),
            record_count=written,
            skipped_count=len(chunks) - len(records),
            processing_time_ms=elapsed_ms,
        )

    def _build_records(
        self,
        namespace: str,
        document_url: str,
        chunks: list[Chunk],
        vectors: list[list[float]],
    ) -> list[VectorRecord]:
        records = []
        for chunk, vector in zip(chunks, vectors):
            if len(vector) != self._vector_index.dimension:
                logger.warning(
                    f"{__name__}:_build_records - Skipping chunk {chunk.index}: "
                    f"vector dimension {len(vector)} != {self._vector_index.dimension}"
                )
                continue
            records.append(
                VectorRecord(
                    id=record_id(namespace, chunk.index),
                    values=vector,
                    payload=VectorPayload(
                        text=chunk.text,
                        source_url=document_url,
                        chunk_index=chunk.index,
                    ),
                )
            )
        return records
