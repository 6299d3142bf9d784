"""
Similarity query client.

Async capability the classifier consumes: one text in, the single closest
reference entry out. Blocking vector store calls run on a bounded thread pool
owned by the client, so a slow index can occupy at most `max_workers` threads
and queries still queued when their request is abandoned never start.

Dependencies: asyncio, concurrent.futures, profanity_backend.core.exceptions
System role: Narrow interface between classification logic and the index
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Protocol, runtime_checkable

from profanity_backend.boundary.vdb.vector_schemas import SimilarityMatch
from profanity_backend.core.exceptions import VectorStoreError
from profanity_backend.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


@runtime_checkable
class SimilarityQueryClient(Protocol):
    """Anything that can return the closest reference entry for a text."""

    async def query(self, text: str) -> SimilarityMatch | None:
        ...


class SearchableStore(Protocol):
    def similarity_search(self, query: str, k: int = 1) -> list[SimilarityMatch]:
        ...


class VectorStoreSimilarityClient:
    """SimilarityQueryClient backed by a FAISS or S3 Vectors store."""

    def __init__(self, store: SearchableStore, max_workers: int = 16) -> None:
        """
        Initialize client.

        Args:
            store: Vector store exposing similarity_search(query, k)
            max_workers: Upper bound on concurrent blocking store calls
        """
        self._store = store
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="similarity-query",
        )

    @property
    def store(self) -> SearchableStore:
        return self._store

    async def query(self, text: str) -> SimilarityMatch | None:
        """
        Query the index for the closest entry.

        Cancelling the awaiting task withdraws the call if no worker has
        picked it up yet.

        Args:
            text: Chunk text

        Returns:
            SimilarityMatch | None: Best entry, or None when the index is empty

        Raises:
            VectorStoreError: When the store call fails for any reason
        """
        loop = asyncio.get_running_loop()
        try:
            results = await loop.run_in_executor(
                self._executor, self._store.similarity_search, text, 1
            )
        except Exception as e:
            logger.error(
                f"{__name__}:query - FAILED: {type(e).__name__}: {e}",
                extra={"chunk_preview": safe_log_value(text, max_length=50)},
            )
            raise VectorStoreError(
                message="Similarity query failed",
                operation="query",
                details={"error_type": type(e).__name__, "error": str(e)},
            ) from e

        return results[0] if results else None

    def close(self) -> None:
        """Drop queued store calls and release worker threads once idle."""
        self._executor.shutdown(wait=False, cancel_futures=True)
