"""
Run endpoint error handling utilities.

Decorator mapping pipeline exceptions to HTTP responses so every failure of
the question-answering route has a uniform shape.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from docqa.core.exceptions import (
    DocQAException,
    DocumentFetchError,
    EmbeddingError,
    InvalidInputError,
    LLMError,
    UnsupportedTypeError,
    VectorIndexError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

_UPSTREAM_ERRORS = (DocumentFetchError, EmbeddingError, VectorIndexError, LLMError)


def status_for_error(error: BaseException) -> int:
    """HTTP status code for a pipeline exception."""
    if isinstance(error, InvalidInputError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, UnsupportedTypeError):
        return status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    if isinstance(error, _UPSTREAM_ERRORS):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_rag_errors(func: F) -> F:
    """
    Decorator to transform pipeline errors into HTTPExceptions.

    Client errors are logged as warnings, provider and unexpected failures
    as errors with traceback.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except DocQAException as e:
            code = status_for_error(e)
            if code < 500:
                logger.warning(f"{__name__}:handle_rag_errors - Rejected request: {e}")
            else:
                logger.error(f"{__name__}:handle_rag_errors - Upstream failure: {e}")
            raise HTTPException(status_code=code, detail=e.message) from e

        except Exception as e:
            logger.exception(f"{__name__}:handle_rag_errors - Unexpected failure: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred while processing the request: {e}",
            ) from e

    return wrapper  # type: ignore
