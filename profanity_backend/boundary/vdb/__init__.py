"""
Vector database boundary layer.

Provides the similarity query client and the vector stores behind it.
- FAISSVectorsStore: Local FAISS index (development)
- S3VectorsStore: Amazon S3 Vectors index (production)

Dependencies: langchain_community, langchain_aws
System role: Vector store adapter for similarity classification
"""

from profanity_backend.boundary.vdb.similarity_client import (
    SimilarityQueryClient,
    VectorStoreSimilarityClient,
)
from profanity_backend.boundary.vdb.vector_schemas import SimilarityMatch

__all__ = [
    "SimilarityMatch",
    "SimilarityQueryClient",
    "VectorStoreSimilarityClient",
]
