"""
Vector store factory for selecting between FAISS (dev) and S3Vectors (prod).

Depends on VECTOR_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: profanity_backend.boundary.vdb, profanity_backend.configs
System role: Vector store instantiation and selection
"""

import logging

from profanity_backend.configs import get_settings

logger = logging.getLogger(__name__)


def get_vector_store():
    """
    Factory function to get vector store based on environment configuration.

    Stores are imported lazily so the unused backend's SDK is never loaded.

    Returns:
        FAISSVectorsStore or S3VectorsStore: Configured vector store instance

    Raises:
        ValueError: If VECTOR_STORE_TYPE is invalid
    """
    settings = get_settings()
    config = settings.vector_store
    store_type = config.store_type.lower()

    if store_type == "faiss":
        from profanity_backend.boundary.vdb.faiss_vectors_store import FAISSVectorsStore

        logger.info(f"{__name__}:get_vector_store - Creating FAISS vector store (local dev mode)")
        return FAISSVectorsStore(
            index_dir=config.faiss_index_dir,
            index_name=config.index_name,
            embedding_model_id=config.embedding_model,
            embedding_dimension=config.embedding_dimension,
        )

    if store_type == "s3":
        from profanity_backend.boundary.vdb.s3_vectors_store import S3VectorsStore

        logger.info(f"{__name__}:get_vector_store - Creating S3 Vectors store (production mode)")
        return S3VectorsStore(
            vectors_bucket=config.vectors_bucket,
            index_name=config.index_name,
            region=config.aws_region,
            embedding_model_id=config.embedding_model,
            embedding_dimension=config.embedding_dimension,
            retry_deadline_seconds=settings.classifier.request_timeout_seconds,
        )

    raise ValueError(
        f"Invalid VECTOR_STORE_TYPE: {store_type}. "
        f"Must be 'faiss' (dev) or 's3' (production)."
    )
