"""
Chunk domain model.

Represents a contiguous slice of extracted document text with its position.

Dependencies: pydantic
System role: Document chunk data structure
"""

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """Document chunk with its sequence position."""

    index: int = Field(ge=0, description="Position of the chunk in the document")
    text: str = Field(min_length=1, description="Trimmed chunk text")
