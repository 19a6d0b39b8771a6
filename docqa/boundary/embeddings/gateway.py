"""
Embedding gateway.

Turns text into vectors through a LangChain Embeddings model, one call per
text, with a per-call timeout. Batch embedding runs each batch concurrently
and pauses between batches to stay under provider rate limits.

Dependencies: langchain_core, asyncio
System role: Embedding step for both indexing and retrieval
"""

import asyncio
import logging

from langchain_core.embeddings import Embeddings

from docqa.core.exceptions import EmbeddingError
from docqa.observability.log_utils import preview

logger = logging.getLogger(__name__)


class EmbeddingGateway:
    """Async, rate-limited access to an embedding model."""

    def __init__(
        self,
        embeddings: Embeddings,
        batch_size: int = 25,
        batch_delay_s: float = 1.0,
        timeout_s: float = 30.0,
    ) -> None:
        """
        Initialize gateway.

        Args:
            embeddings: LangChain embeddings model
            batch_size: Texts embedded concurrently per batch
            batch_delay_s: Pause between consecutive batches
            timeout_s: Per-call timeout
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self._embeddings = embeddings
        self.batch_size = batch_size
        self.batch_delay_s = batch_delay_s
        self.timeout_s = timeout_s

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Args:
            text: Text to embed

        Returns:
            list[float]: Embedding vector, or an empty list for blank input

        Raises:
            EmbeddingError: Provider failure, timeout or malformed response
        """
        if not text or not text.strip():
            logger.warning(f"{__name__}:embed - Skipping blank text")
            return []

        try:
            vector = await asyncio.wait_for(
                self._embeddings.aembed_query(text),
                timeout=self.timeout_s,
            )
        except asyncio.TimeoutError as e:
            raise EmbeddingError(
                f"Embedding call timed out after {self.timeout_s}s",
                details={"text_preview": preview(text)},
            ) from e
        except Exception as e:
            logger.error(f"{__name__}:embed - Embedding failed for '{preview(text)}': {e}")
            raise EmbeddingError(
                f"Failed to get embedding: {e}",
                details={"text_preview": preview(text)},
            ) from e

        if not isinstance(vector, (list, tuple)) or not vector or not all(
            isinstance(v, (int, float)) for v in vector
        ):
            raise EmbeddingError(
                "Embedding provider returned a malformed vector",
                details={"text_preview": preview(text)},
            )

        return [float(v) for v in vector]

    async def embed_many(self, texts: list[str]) -> list[list[float]]:
        """
        Embed texts in rate-limited batches.

        A failed item yields an empty vector in its position; the caller
        decides whether to skip it.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One vector per input text, same order
        """
        vectors: list[list[float]] = []
        total_batches = (len(texts) + self.batch_size - 1) // self.batch_size

        for batch_number, start in enumerate(range(0, len(texts), self.batch_size), start=1):
            batch = texts[start : start + self.batch_size]
            logger.info(
                f"{__name__}:embed_many - Embedding batch {batch_number}/{total_batches} "
                f"({len(batch)} texts)"
            )

            results = await asyncio.gather(
                *(self.embed(text) for text in batch),
                return_exceptions=True,
            )
            for offset, result in enumerate(results):
                if isinstance(result, EmbeddingError):
                    logger.warning(
                        f"{__name__}:embed_many - Text {start + offset} not embedded: {result.message}"
                    )
                    vectors.append([])
                elif isinstance(result, BaseException):
                    raise result
                else:
                    vectors.append(result)

            if batch_number < total_batches and self.batch_delay_s > 0:
                await asyncio.sleep(self.batch_delay_s)

        return vectors
