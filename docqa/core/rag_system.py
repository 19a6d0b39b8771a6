"""
RAG system facade.

Single entry point used by the HTTP layer: validate the request, make sure
the document is indexed, then answer the questions.

Dependencies: docqa.core.indexing, docqa.core.answering
System role: Request-level orchestration of the RAG pipeline
"""

import logging

from docqa.core.answering import AnswerOrchestrator
from docqa.core.exceptions import InvalidInputError
from docqa.core.indexing import IndexingOrchestrator

logger = logging.getLogger(__name__)


class RAGSystem:
    """Index-then-answer facade."""

    def __init__(self, indexing: IndexingOrchestrator, answering: AnswerOrchestrator) -> None:
        self.indexing = indexing
        self.answering = answering

    async def ensure_indexed_and_answer(self, document_url: str, questions: list[str]) -> list[str]:
        """
        Answer questions about a document, indexing it first if needed.

        Args:
            document_url: Absolute document URL
            questions: Non-empty list of questions

        Returns:
            list[str]: One answer per question, same order

        Raises:
            InvalidInputError: Missing URL, empty question list or non-string question
            DocumentFetchError: Download failed
            UnsupportedTypeError: Document type not supported
            EmbeddingError: Question embedding failed
            VectorIndexError: Vector index failure
        """
        if not document_url or not document_url.strip():
            raise InvalidInputError("A document URL is required", field="documents")
        if not questions:
            raise InvalidInputError("At least one question is required", field="questions")
        if not isinstance(questions, list) or not all(isinstance(q, str) for q in questions):
            raise InvalidInputError("Questions must be a list of strings", field="questions")

        namespace = await self.indexing.ensure_indexed(document_url)
        answers = await self.answering.answer_for_namespace(namespace, questions)
        logger.info(f"{__name__}:ensure_indexed_and_answer - Answered {len(answers)} questions")
        return answers
