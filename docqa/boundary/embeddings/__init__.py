"""Embedding model wrapper and gateway."""
