"""
Chunk scorer.

Queries the similarity index once per chunk, concurrently, then reduces the
collected matches against the per-granularity thresholds. The reduction runs
only after every query has completed, so no state is shared between queries.

Dependencies: asyncio, profanity_backend.boundary.vdb, profanity_backend.models
System role: Third stage of the classification pipeline
"""

import asyncio
import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from profanity_backend.boundary.vdb.similarity_client import SimilarityQueryClient
from profanity_backend.models.chunk import Chunk, ChunkGranularity, FlaggedMatch, Match

logger = logging.getLogger(__name__)


class ScoringOutcome(BaseModel):
    """Every match of a request plus the deduplicated flagged candidates."""

    model_config = ConfigDict(frozen=True)

    matches: tuple[Match, ...]
    flagged: tuple[FlaggedMatch, ...]

    @property
    def scored_matches(self) -> tuple[Match, ...]:
        return tuple(match for match in self.matches if match.has_score)


class ChunkScorer:
    """Fan-out querying and threshold reduction."""

    def __init__(
        self,
        client: SimilarityQueryClient,
        word_threshold: float = 0.95,
        semantic_threshold: float = 0.86,
    ) -> None:
        self.client = client
        self.word_threshold = word_threshold
        self.semantic_threshold = semantic_threshold

    def threshold_for(self, granularity: ChunkGranularity) -> float:
        if granularity is ChunkGranularity.WORD:
            return self.word_threshold
        return self.semantic_threshold

    async def _query_chunk(self, chunk: Chunk) -> Match:
        result = await self.client.query(chunk.text)
        if result is None:
            return Match(chunk=chunk)
        return Match(chunk=chunk, text=result.matched_text, score=result.score)

    async def query_chunks(self, chunks: Sequence[Chunk]) -> list[Match]:
        """
        Query all chunks concurrently, preserving input order.

        A failing query cancels the rest and propagates once they have settled.
        """
        tasks = [asyncio.ensure_future(self._query_chunk(chunk)) for chunk in chunks]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    def collect_flagged(self, matches: Sequence[Match]) -> list[FlaggedMatch]:
        """Matches strictly above their threshold, first occurrence per (score, text)."""
        candidates: dict[tuple[float, str], FlaggedMatch] = {}
        for match in matches:
            if not match.has_score:
                continue
            if match.score > self.threshold_for(match.chunk.granularity):
                flagged = FlaggedMatch.from_match(match)
                candidates.setdefault(flagged.dedup_key, flagged)
        return list(candidates.values())

    async def score(
        self,
        word_chunks: Sequence[Chunk],
        semantic_chunks: Sequence[Chunk],
    ) -> ScoringOutcome:
        """
        Query both decompositions and reduce to flagged candidates.

        Args:
            word_chunks: Single-token chunks
            semantic_chunks: Overlapping window chunks

        Returns:
            ScoringOutcome: All matches (word chunks first) and flagged candidates
        """
        matches = await self.query_chunks([*word_chunks, *semantic_chunks])
        flagged = self.collect_flagged(matches)

        logger.debug(
            f"{__name__}:score - {len(matches)} matches, {len(flagged)} flagged",
            extra={"word_chunks": len(word_chunks), "semantic_chunks": len(semantic_chunks)},
        )
        return ScoringOutcome(matches=tuple(matches), flagged=tuple(flagged))
