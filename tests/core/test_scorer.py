"""
Test suite for ChunkScorer.

Covers per-granularity thresholds, duplicate suppression, query fan-out and
failure propagation.
"""

import asyncio

import pytest

from profanity_backend.core.classification.scorer import ChunkScorer
from profanity_backend.core.exceptions import VectorStoreError
from profanity_backend.models.chunk import Chunk, ChunkGranularity, Match


def word(text: str, position: int = 0) -> Chunk:
    return Chunk(text=text, granularity=ChunkGranularity.WORD, position=position)


def window(text: str, position: int = 0) -> Chunk:
    return Chunk(text=text, granularity=ChunkGranularity.SEMANTIC, position=position)


class TestThresholds:
    """Test suite for threshold application."""

    @pytest.mark.asyncio
    async def test_word_score_above_word_threshold_is_flagged(self, fake_client_cls) -> None:
        # Arrange
        scorer = ChunkScorer(fake_client_cls(matches={"damn": ("damn", 0.97)}))

        # Act
        outcome = await scorer.score([word("damn")], [])

        # Assert
        assert [flagged.text for flagged in outcome.flagged] == ["damn"]

    @pytest.mark.asyncio
    async def test_word_score_equal_to_threshold_is_not_flagged(self, fake_client_cls) -> None:
        scorer = ChunkScorer(fake_client_cls(matches={"darn": ("damn", 0.95)}))

        outcome = await scorer.score([word("darn")], [])

        assert outcome.flagged == ()

    @pytest.mark.asyncio
    async def test_word_score_between_thresholds_is_not_flagged(self, fake_client_cls) -> None:
        """Single words need the higher word-level bar."""
        scorer = ChunkScorer(fake_client_cls(matches={"class": ("ass", 0.9)}))

        outcome = await scorer.score([word("class")], [])

        assert outcome.flagged == ()

    @pytest.mark.asyncio
    async def test_semantic_score_above_semantic_threshold_is_flagged(
        self, fake_client_cls
    ) -> None:
        scorer = ChunkScorer(fake_client_cls(multi_word=("piece of garbage", 0.9)))

        outcome = await scorer.score([], [window("a piece of trash")])

        assert len(outcome.flagged) == 1
        assert outcome.flagged[0].granularity is ChunkGranularity.SEMANTIC
        assert outcome.flagged[0].score == 0.9

    @pytest.mark.asyncio
    async def test_semantic_score_equal_to_threshold_is_not_flagged(
        self, fake_client_cls
    ) -> None:
        scorer = ChunkScorer(fake_client_cls(multi_word=("x", 0.86)))

        outcome = await scorer.score([], [window("some words")])

        assert outcome.flagged == ()

    def test_threshold_for_each_granularity(self, fake_client_cls) -> None:
        scorer = ChunkScorer(fake_client_cls(), word_threshold=0.9, semantic_threshold=0.7)

        assert scorer.threshold_for(ChunkGranularity.WORD) == 0.9
        assert scorer.threshold_for(ChunkGranularity.SEMANTIC) == 0.7


class TestCollectFlagged:
    """Test suite for candidate set reduction."""

    def test_identical_score_and_text_are_counted_once(self, fake_client_cls) -> None:
        # Arrange
        scorer = ChunkScorer(fake_client_cls())
        matches = [
            Match(chunk=window("you piece of", 0), text="piece of garbage", score=0.9),
            Match(chunk=window("piece of garbage", 1), text="piece of garbage", score=0.9),
        ]

        # Act
        flagged = scorer.collect_flagged(matches)

        # Assert
        assert len(flagged) == 1
        assert flagged[0].position == 0

    def test_same_text_with_different_scores_are_distinct(self, fake_client_cls) -> None:
        scorer = ChunkScorer(fake_client_cls())
        matches = [
            Match(chunk=window("a", 0), text="piece of garbage", score=0.9),
            Match(chunk=window("b", 1), text="piece of garbage", score=0.91),
        ]

        assert len(scorer.collect_flagged(matches)) == 2

    def test_matches_without_score_are_ignored(self, fake_client_cls) -> None:
        scorer = ChunkScorer(fake_client_cls())

        assert scorer.collect_flagged([Match(chunk=word("hello"))]) == []


class TestQueryFanOut:
    """Test suite for concurrent querying."""

    @pytest.mark.asyncio
    async def test_every_chunk_produces_one_match_in_order(self, fake_client_cls) -> None:
        # Arrange
        client = fake_client_cls(default=None, matches={"b": ("ref-b", 0.4)})
        scorer = ChunkScorer(client)
        chunks = [word("a", 0), word("b", 1), window("a b", 0)]

        # Act
        outcome = await scorer.score(chunks[:2], chunks[2:])

        # Assert
        assert [match.chunk for match in outcome.matches] == chunks
        assert [match.score for match in outcome.matches] == [None, 0.4, None]
        assert [match.score for match in outcome.scored_matches] == [0.4]

    @pytest.mark.asyncio
    async def test_queries_run_concurrently(self, fake_client_cls) -> None:
        """Ten queries sleeping 0.2s each must finish well under 2s."""
        client = fake_client_cls(delay=0.2)
        scorer = ChunkScorer(client)
        chunks = [word(f"w{i}", i) for i in range(10)]

        loop = asyncio.get_running_loop()
        started = loop.time()
        await scorer.score(chunks, [])
        elapsed = loop.time() - started

        assert elapsed < 1.0
        assert len(client.calls) == 10

    @pytest.mark.asyncio
    async def test_failed_query_fails_the_whole_scoring(self, fake_client_cls) -> None:
        scorer = ChunkScorer(fake_client_cls(fail_on="boom"))

        with pytest.raises(VectorStoreError):
            await scorer.score([word("fine", 0), word("boom", 1)], [])

    @pytest.mark.asyncio
    async def test_failed_query_settles_siblings_before_raising(self) -> None:
        # Arrange
        class HangingClient:
            def __init__(self) -> None:
                self.cancelled: list[str] = []

            async def query(self, text: str):
                if text == "boom":
                    raise VectorStoreError("Similarity query failed", operation="query")
                try:
                    await asyncio.sleep(10)
                except asyncio.CancelledError:
                    self.cancelled.append(text)
                    raise

        client = HangingClient()
        scorer = ChunkScorer(client)

        # Act
        with pytest.raises(VectorStoreError):
            await scorer.query_chunks([word("slow", 0), word("boom", 1), window("slow too", 2)])

        # Assert
        assert sorted(client.cancelled) == ["slow", "slow too"]
