"""Pydantic data models for chunks, matches and classification results."""

from profanity_backend.models.chunk import Chunk, ChunkGranularity, FlaggedMatch, Match
from profanity_backend.models.classification import ClassificationResult, ClassifyResponse
from profanity_backend.models.common import ErrorResponse

__all__ = [
    "Chunk",
    "ChunkGranularity",
    "ClassificationResult",
    "ClassifyResponse",
    "ErrorResponse",
    "FlaggedMatch",
    "Match",
]
