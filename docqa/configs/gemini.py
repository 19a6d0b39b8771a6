"""
Google Gemini configuration settings.

Model identifiers, credentials and timeouts for the embedding and
question-answering models.

Dependencies: pydantic, pydantic_settings
System role: LLM and embedding provider configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Gemini provider configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
        description="Google Generative AI API key",
    )
    qna_model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model used to answer questions",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID",
    )
    temperature: float = Field(default=0.0, ge=0.0, le=2.0)

    embedding_timeout_s: float = Field(default=30.0, gt=0, description="Per-call embedding timeout")
    llm_timeout_s: float = Field(default=60.0, gt=0, description="Per-call LLM timeout")
