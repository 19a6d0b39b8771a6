"""
Boundary-aware text chunker.

Slides a fixed-size window across extracted document text and pulls each
window's end back to a paragraph, sentence or line break when one sits in
the last fifth of the window.

Dependencies: docqa.models.chunk
System role: First stage of the indexing pass
"""

from docqa.models.chunk import Chunk

# A break must sit past this fraction of the window to be used as the cut point
BOUNDARY_THRESHOLD = 0.8

# Preferred break markers, strongest first
_BOUNDARIES = ("\n\n", ".", "\n")


class TextChunker:
    """Split text into overlapping, boundary-aware chunks."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 100) -> None:
        """
        Initialize chunker with window geometry.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Characters shared by consecutive windows

        Raises:
            ValueError: When the geometry would not advance the window
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if chunk_overlap < 0:
            raise ValueError(f"chunk_overlap cannot be negative, got {chunk_overlap}")
        if chunk_overlap >= chunk_size:
            raise ValueError(
                f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})"
            )

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.stride = chunk_size - chunk_overlap

    def chunk(self, text: str) -> list[str]:
        """
        Split text into trimmed, non-empty chunks.

        Args:
            text: Extracted document text

        Returns:
            list[str]: Chunks in document order
        """
        chunks: list[str] = []
        length = len(text)
        start = 0

        while start < length:
            end = min(start + self.chunk_size, length)
            window = text[start:end]

            if end < length:
                window = window[: self._cut_point(window)]

            piece = window.strip()
            if piece:
                chunks.append(piece)

            if end >= length:
                break
            start += self.stride

        return chunks

    def chunk_document(self, text: str) -> list[Chunk]:
        """Split text into indexed Chunk models."""
        return [Chunk(index=i, text=piece) for i, piece in enumerate(self.chunk(text))]

    @staticmethod
    def _cut_point(window: str) -> int:
        """Return the length to keep from a window that does not end the text."""
        threshold = len(window) * BOUNDARY_THRESHOLD
        for marker in _BOUNDARIES:
            position = window.rfind(marker)
            if position > threshold:
                return position + len(marker)
        return len(window)


def chunk_text(text: str, chunk_size: int, chunk_overlap: int) -> list[str]:
    """
    Split text with a one-off chunker.

    Args:
        text: Extracted document text
        chunk_size: Maximum chunk size in characters
        chunk_overlap: Characters shared by consecutive windows

    Returns:
        list[str]: Chunks in document order
    """
    return TextChunker(chunk_size, chunk_overlap).chunk(text)
