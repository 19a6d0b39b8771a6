"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

The base class ignores output_dimensionality in the constructor, so every
call made through this wrapper passes the configured dimension explicitly.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency with the vector index
"""

import logging

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings that always requests the same dimension."""

    _output_dimensionality: int = 768

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 768,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Dimension of every returned vector
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    async def aembed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> list[float]:
        dim = output_dimensionality or self._output_dimensionality
        return await super().aembed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=dim,
        )
