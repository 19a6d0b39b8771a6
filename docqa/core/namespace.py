"""
Document namespace derivation.

A namespace is the SHA-256 hex digest of the document URL. It depends only
on the URL string, never on the downloaded content.

Dependencies: hashlib
System role: Partition key for a document's vectors
"""

import hashlib


def namespace_for_url(document_url: str) -> str:
    """
    Derive the vector index namespace for a document.

    Args:
        document_url: Source URL of the document

    Returns:
        str: 64-character lowercase hex digest
    """
    return hashlib.sha256(document_url.encode("utf-8")).hexdigest()


def record_id(namespace: str, chunk_index: int) -> str:
    """Deterministic vector record id for a chunk of a namespace."""
    return f"{namespace}-chunk-{chunk_index}"
