"""
Vector index factory selecting between in-memory (dev) and S3 Vectors (prod).

Depends on the VECTOR_STORE_STORE_TYPE environment variable.

Dependencies: docqa.boundary.vdb, docqa.configs
System role: Vector index instantiation and selection
"""

import logging

from docqa.boundary.vdb.base import VectorIndex
from docqa.boundary.vdb.memory_index import InMemoryVectorIndex
from docqa.boundary.vdb.s3_vectors_index import S3VectorsIndex
from docqa.configs import Settings, get_settings

logger = logging.getLogger(__name__)


def get_vector_index(settings: Settings | None = None) -> VectorIndex:
    """
    Build the vector index selected by configuration.

    Args:
        settings: Application settings, loaded from the environment when None

    Returns:
        VectorIndex: InMemoryVectorIndex or S3VectorsIndex

    Raises:
        ValueError: If the configured store type is unknown
    """
    settings = settings or get_settings()
    config = settings.vector_store
    store_type = config.store_type.lower()

    if store_type == "memory":
        logger.info(f"{__name__}:get_vector_index - Creating in-memory vector index (dev mode)")
        return InMemoryVectorIndex(dimension=config.embedding_dimension)

    if store_type == "s3":
        logger.info(f"{__name__}:get_vector_index - Creating S3 Vectors index (production mode)")
        return S3VectorsIndex(
            vectors_bucket=config.vectors_bucket,
            index_name=config.index_name,
            dimension=config.embedding_dimension,
            region=config.aws_region,
            upsert_batch_size=config.upsert_batch_size,
        )

    raise ValueError(
        f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
        f"Must be 'memory' (dev) or 's3' (production)."
    )
