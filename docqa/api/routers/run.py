"""
Question-answering API endpoint.

Routes: POST /hackrx/run

Dependencies: docqa.core.rag_system, docqa.api.deps
System role: HTTP entry point of the RAG pipeline
"""

import logging
import re

from fastapi import APIRouter, Depends

from docqa.api.deps.auth import require_bearer_token, require_gemini_key
from docqa.api.deps.dependencies import get_rag_system, get_settings_dependency
from docqa.api.retry import run_with_retries
from docqa.api.routers.run_error_handling import handle_rag_errors
from docqa.configs import Settings
from docqa.core.rag_system import RAGSystem
from docqa.models.api import RunRequest, RunResponse

logger = logging.getLogger(__name__)

_SCHEME = re.compile(r"^https?://", re.IGNORECASE)

router = APIRouter(prefix="/hackrx", tags=["hackrx"])


def normalize_document_url(url: str) -> str:
    """Trim the URL and prepend https:// when it has no http(s) scheme."""
    url = url.strip()
    if url and not _SCHEME.match(url):
        return f"https://{url}"
    return url


@router.post(
    "/run",
    response_model=RunResponse,
    dependencies=[Depends(require_bearer_token), Depends(require_gemini_key)],
)
@handle_rag_errors
async def run(
    request: RunRequest,
    rag_system: RAGSystem = Depends(get_rag_system),
    settings: Settings = Depends(get_settings_dependency),
) -> RunResponse:
    """
    Answer questions about a document.

    Args:
        request: Document URL and questions
        rag_system: Injected RAG facade
        settings: Injected settings (retry policy)

    Returns:
        RunResponse: Answers in question order
    """
    document_url = normalize_document_url(request.documents)
    logger.info(
        f"{__name__}:run - Received {len(request.questions)} questions for {document_url}"
    )

    answers = await run_with_retries(
        rag_system.ensure_indexed_and_answer,
        document_url,
        request.questions,
        max_attempts=settings.api.max_retries,
        initial_delay_s=settings.api.initial_retry_delay_ms / 1000,
    )
    return RunResponse(answers=answers)
