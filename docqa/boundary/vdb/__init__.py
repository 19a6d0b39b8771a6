"""
Vector index backends.

Exports: VectorIndex, InMemoryVectorIndex, S3VectorsIndex, get_vector_index
"""

from docqa.boundary.vdb.base import VectorIndex
from docqa.boundary.vdb.memory_index import InMemoryVectorIndex
from docqa.boundary.vdb.s3_vectors_index import S3VectorsIndex
from docqa.boundary.vdb.vector_index_factory import get_vector_index

__all__ = ["VectorIndex", "InMemoryVectorIndex", "S3VectorsIndex", "get_vector_index"]
