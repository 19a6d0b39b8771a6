"""
Gemini question-answering client.

Sends a fully rendered prompt to a LangChain chat model and returns the
reply text. Every provider failure, including a timeout, surfaces as LLMError.

Dependencies: langchain_google_genai, langchain_core
System role: Answer generation step of the answering pass
"""

import asyncio
import logging
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from docqa.core.exceptions import LLMError

logger = logging.getLogger(__name__)


def message_text(content: Any) -> str:
    """
    Flatten chat message content to plain text.

    Gemini may return either a string or a list of content parts.
    """
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return "" if content is None else str(content)


class GeminiLLMClient:
    """Prompt-in, text-out wrapper around a chat model."""

    def __init__(
        self,
        model: BaseChatModel | None = None,
        model_name: str = "gemini-2.5-flash",
        api_key: str | None = None,
        temperature: float = 0.0,
        timeout_s: float = 60.0,
    ) -> None:
        """
        Initialize client.

        Args:
            model: Chat model to use; a ChatGoogleGenerativeAI is built when None
            model_name: Gemini model ID
            api_key: Google API key, read from the environment when None
            temperature: Sampling temperature
            timeout_s: Per-call timeout
        """
        if model is None:
            kwargs: dict[str, Any] = {"model": model_name, "temperature": temperature, "max_retries": 0}
            if api_key:
                kwargs["google_api_key"] = api_key
            model = ChatGoogleGenerativeAI(**kwargs)
            logger.info(f"{__name__}:__init__ - Initialized with model={model_name}")
        self._model = model
        self.timeout_s = timeout_s

    async def generate(self, prompt: str) -> str:
        """
        Generate a reply for a prompt.

        Args:
            prompt: Rendered prompt text

        Returns:
            str: Reply text, possibly empty

        Raises:
            LLMError: Provider failure or timeout
        """
        try:
            message = await asyncio.wait_for(self._model.ainvoke(prompt), timeout=self.timeout_s)
        except asyncio.TimeoutError as e:
            raise LLMError(f"LLM call timed out after {self.timeout_s}s") from e
        except Exception as e:
            logger.error(f"{__name__}:generate - LLM call failed: {e}")
            raise LLMError(str(e)) from e

        return message_text(getattr(message, "content", message))
