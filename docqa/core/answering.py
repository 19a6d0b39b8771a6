"""
Answer orchestrator.

Answers every question of a request concurrently: embed the question,
retrieve the top-k chunks of the document's namespace, prompt the LLM.
LLM dispatches are staggered and answers are returned in question order.

Dependencies: docqa.boundary, docqa.core.prompt, asyncio
System role: Answering pass of the RAG pipeline
"""

import asyncio
import logging

from docqa.boundary.embeddings.gateway import EmbeddingGateway
from docqa.boundary.llm.gemini_client import GeminiLLMClient
from docqa.boundary.vdb.base import VectorIndex
from docqa.core.exceptions import LLMError
from docqa.core.namespace import namespace_for_url
from docqa.core.prompt import build_prompt, clean_answer, estimate_tokens
from docqa.observability.log_utils import preview

logger = logging.getLogger(__name__)

LLM_ERROR_PREFIX = "Error getting answer: "
NO_ANSWER = "No answer generated."


class AnswerOrchestrator:
    """Retrieval-augmented answering for a list of questions."""

    def __init__(
        self,
        embedding_gateway: EmbeddingGateway,
        vector_index: VectorIndex,
        llm: GeminiLLMClient,
        top_k: int = 5,
        dispatch_delay_s: float = 0.2,
        max_input_tokens: int = 30000,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            embedding_gateway: Question embedding
            vector_index: Index holding the document chunks
            llm: Answer generator
            top_k: Chunks retrieved per question
            dispatch_delay_s: Delay between consecutive question dispatches
            max_input_tokens: Estimated prompt size above which a warning is logged
        """
        self._embedding_gateway = embedding_gateway
        self._vector_index = vector_index
        self._llm = llm
        self.top_k = top_k
        self.dispatch_delay_s = dispatch_delay_s
        self.max_input_tokens = max_input_tokens

    async def answer_all(self, document_url: str, questions: list[str]) -> list[str]:
        """
        Answer questions about an already indexed document.

        Args:
            document_url: Absolute document URL
            questions: Questions to answer

        Returns:
            list[str]: One answer per question, same order
        """
        return await self.answer_for_namespace(namespace_for_url(document_url), questions)

    async def answer_for_namespace(self, namespace: str, questions: list[str]) -> list[str]:
        logger.info(
            f"{__name__}:answer_for_namespace - Answering {len(questions)} questions "
            f"against {namespace}"
        )
        return list(
            await asyncio.gather(
                *(
                    self._answer_one(namespace, question, position)
                    for position, question in enumerate(questions)
                )
            )
        )

    async def retrieve(self, namespace: str, question: str) -> list[str]:
        """Top-k chunk texts for a question; empty when the question cannot be embedded."""
        vector = await self._embedding_gateway.embed(question)
        if not vector:
            return []
        return await self._vector_index.query(namespace, vector, self.top_k)

    async def _answer_one(self, namespace: str, question: str, position: int) -> str:
        if position and self.dispatch_delay_s > 0:
            await asyncio.sleep(position * self.dispatch_delay_s)

        context_texts = await self.retrieve(namespace, question)
        prompt = build_prompt(context_texts, question)

        tokens = estimate_tokens(prompt)
        if tokens > self.max_input_tokens:
            logger.warning(
                f"{__name__}:_answer_one - Prompt for '{preview(question)}' is ~{tokens} tokens, "
                f"above the {self.max_input_tokens} token limit"
            )

        try:
            raw = await self._llm.generate(prompt)
        except LLMError as e:
            logger.error(f"{__name__}:_answer_one - LLM failed for '{preview(question)}': {e}")
            raw = f"{LLM_ERROR_PREFIX}{e.message}"

        if not raw or not raw.strip():
            raw = NO_ANSWER
        return clean_answer(raw)
