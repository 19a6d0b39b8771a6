"""
HTTP request and response models.

Dependencies: pydantic
System role: Wire schemas for the question-answering endpoint
"""

from pydantic import BaseModel, Field


class RunRequest(BaseModel):
    """Document URL plus the questions to answer about it."""

    documents: str = Field(default="", description="URL of the document to query")
    questions: list[str] = Field(default_factory=list, description="Questions, answered in order")


class RunResponse(BaseModel):
    """Answers in the same order as the request questions."""

    answers: list[str]


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
