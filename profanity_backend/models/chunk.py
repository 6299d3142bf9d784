"""
Chunk and match domain models.

A Chunk is one span of normalized text compared against the index; a Match
is the index's answer for that chunk; a FlaggedMatch is a Match whose score
exceeded the threshold of its granularity.

Dependencies: pydantic
System role: Per-chunk data structures of the classification pipeline
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ChunkGranularity(str, Enum):
    """Decomposition a chunk originates from."""

    WORD = "word"
    SEMANTIC = "semantic"

    @property
    def rank(self) -> int:
        """Tie-break rank, word-level evidence first."""
        return 0 if self is ChunkGranularity.WORD else 1


class Chunk(BaseModel):
    """Span of normalized text tagged with its decomposition."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Chunk text content")
    granularity: ChunkGranularity = Field(description="Originating decomposition")
    position: int = Field(description="Index of the chunk within its decomposition", ge=0)


class Match(BaseModel):
    """Closest reference entry returned for a chunk."""

    model_config = ConfigDict(frozen=True)

    chunk: Chunk
    text: str | None = Field(default=None, description="Matched reference text")
    score: float | None = Field(default=None, description="Similarity score, higher is closer")

    @property
    def has_score(self) -> bool:
        return self.score is not None


class FlaggedMatch(BaseModel):
    """Match that exceeded the threshold for its granularity."""

    model_config = ConfigDict(frozen=True)

    text: str
    score: float
    granularity: ChunkGranularity
    position: int

    @property
    def dedup_key(self) -> tuple[float, str]:
        """Two candidates with identical score and text are the same entry."""
        return (self.score, self.text)

    @property
    def sort_key(self) -> tuple[float, int, int]:
        return (-self.score, self.granularity.rank, self.position)

    @classmethod
    def from_match(cls, match: Match) -> "FlaggedMatch":
        return cls(
            text=match.text or match.chunk.text,
            score=match.score,
            granularity=match.chunk.granularity,
            position=match.chunk.position,
        )
