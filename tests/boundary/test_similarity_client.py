"""Test suite for VectorStoreSimilarityClient."""

import asyncio
import threading
import time
from unittest.mock import MagicMock

import pytest

from profanity_backend.boundary.vdb.similarity_client import (
    SimilarityQueryClient,
    VectorStoreSimilarityClient,
)
from profanity_backend.boundary.vdb.vector_schemas import SimilarityMatch
from profanity_backend.core.exceptions import VectorStoreError


@pytest.fixture
def mock_store() -> MagicMock:
    """Provide mock vector store."""
    return MagicMock()


class TestQuery:
    """Test suite for VectorStoreSimilarityClient.query."""

    @pytest.mark.asyncio
    async def test_query_returns_best_match(self, mock_store: MagicMock) -> None:
        # Arrange
        best = SimilarityMatch(matched_text="damn", score=0.97)
        mock_store.similarity_search.return_value = [best]
        client = VectorStoreSimilarityClient(mock_store)

        # Act
        result = await client.query("damn")

        # Assert
        assert result == best
        mock_store.similarity_search.assert_called_once_with("damn", 1)

    @pytest.mark.asyncio
    async def test_query_returns_none_for_empty_index(self, mock_store: MagicMock) -> None:
        mock_store.similarity_search.return_value = []
        client = VectorStoreSimilarityClient(mock_store)

        assert await client.query("hello") is None

    @pytest.mark.asyncio
    async def test_store_failure_is_wrapped(self, mock_store: MagicMock) -> None:
        mock_store.similarity_search.side_effect = ConnectionError("index unreachable")
        client = VectorStoreSimilarityClient(mock_store)

        with pytest.raises(VectorStoreError) as exc_info:
            await client.query("hello")

        assert exc_info.value.details["operation"] == "query"
        assert exc_info.value.details["error_type"] == "ConnectionError"
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_client_satisfies_protocol(self, mock_store: MagicMock) -> None:
        assert isinstance(VectorStoreSimilarityClient(mock_store), SimilarityQueryClient)


class TestExecutor:
    """Test suite for the client's own worker pool."""

    @pytest.mark.asyncio
    async def test_store_calls_never_exceed_worker_limit(self) -> None:
        # Arrange
        lock = threading.Lock()
        counts = {"active": 0, "peak": 0}

        def search(query: str, k: int = 1) -> list[SimilarityMatch]:
            with lock:
                counts["active"] += 1
                counts["peak"] = max(counts["peak"], counts["active"])
            time.sleep(0.02)
            with lock:
                counts["active"] -= 1
            return [SimilarityMatch(matched_text=query, score=0.5)]

        store = MagicMock()
        store.similarity_search.side_effect = search
        client = VectorStoreSimilarityClient(store, max_workers=2)

        # Act
        results = await asyncio.gather(*(client.query(f"chunk {i}") for i in range(8)))

        # Assert
        assert [result.matched_text for result in results] == [f"chunk {i}" for i in range(8)]
        assert counts["peak"] <= 2
        client.close()

    @pytest.mark.asyncio
    async def test_cancelled_query_that_has_not_started_never_reaches_store(self) -> None:
        release = threading.Event()
        store = MagicMock()
        store.similarity_search.side_effect = lambda query, k=1: release.wait(timeout=5) and []
        client = VectorStoreSimilarityClient(store, max_workers=1)

        running = asyncio.ensure_future(client.query("first"))
        queued = asyncio.ensure_future(client.query("second"))
        await asyncio.sleep(0.05)
        queued.cancel()
        await asyncio.sleep(0.05)
        release.set()

        assert await running is None
        with pytest.raises(asyncio.CancelledError):
            await queued
        store.similarity_search.assert_called_once_with("first", 1)
        client.close()
