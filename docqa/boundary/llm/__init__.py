"""Chat model client used for answer generation."""
