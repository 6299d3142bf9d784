"""
Vector database schemas.

Pydantic models for similarity index results.
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field


class SimilarityMatch(BaseModel):
    """Closest reference entry for a query text."""

    matched_text: str = Field(description="Reference text stored with the entry")
    score: float = Field(description="Similarity score, higher is more similar")


def score_from_cosine_distance(distance: float) -> float:
    """
    Map a cosine distance onto a [0, 1] similarity scale.

    Cosine distance is 1 - cos, so the result equals (1 + cos) / 2.
    """
    return 1.0 - float(distance) / 2.0


def score_from_squared_l2(distance: float) -> float:
    """
    Map a squared L2 distance between unit vectors onto a [0, 1] similarity scale.

    For unit vectors the squared distance is 2 - 2cos, so the result equals
    (1 + cos) / 2 and lines up with score_from_cosine_distance.
    """
    return 1.0 - float(distance) / 4.0
