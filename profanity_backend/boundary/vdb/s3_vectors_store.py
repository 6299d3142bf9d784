"""
S3 Vectors store for production similarity queries.

Queries the reference profanity corpus held in Amazon S3 Vectors (cosine
index). Throttling and transient API errors are retried with exponential
backoff, bounded by the request timeout, before surfacing.

Dependencies: langchain_aws, tenacity, backend embeddings wrapper
System role: Production similarity index (S3 Vectors)
"""

import logging
from typing import Any

from botocore.exceptions import ClientError
from langchain_aws.vectorstores import AmazonS3Vectors
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    stop_before_delay,
    wait_exponential_jitter,
)

from profanity_backend.boundary.vdb.embeddings_wrapper import FixedDimensionEmbeddings
from profanity_backend.boundary.vdb.vector_schemas import (
    SimilarityMatch,
    score_from_cosine_distance,
)

logger = logging.getLogger(__name__)


class S3VectorsStore:
    """Wraps AmazonS3Vectors behind the search/add interface."""

    MAX_ATTEMPTS = 5

    def __init__(
        self,
        vectors_bucket: str = "profanity-dev-vectors",
        index_name: str = "profanity",
        region: str = "ap-southeast-2",
        embedding_model_id: str = "models/gemini-embedding-001",
        embedding_dimension: int = 1024,
        retry_deadline_seconds: float = 10.0,
    ) -> None:
        """
        Initialize S3 Vectors store with Google Gemini embeddings.

        Args:
            vectors_bucket: S3 Vectors bucket name
            index_name: Index name within the bucket
            region: AWS region for S3 Vectors
            embedding_model_id: Google embedding model ID
            embedding_dimension: Output dimension for embeddings
            retry_deadline_seconds: Time after which throttled searches stop retrying
        """
        self._vectors_bucket = vectors_bucket
        self._index_name = index_name
        self._retry_deadline = retry_deadline_seconds

        self._embeddings = FixedDimensionEmbeddings(
            model=embedding_model_id,
            output_dimensionality=embedding_dimension,
        )
        self._vector_store = AmazonS3Vectors(
            vector_bucket_name=vectors_bucket,
            index_name=index_name,
            embedding=self._embeddings,
            region_name=region,
        )
        logger.info(
            f"{__name__}:__init__ - bucket={vectors_bucket}, index={index_name}, region={region}"
        )

    def _search_with_retry(self, query: str, k: int) -> list[tuple]:
        """
        Execute similarity search, retrying throttling until the deadline.

        A retry whose backoff would end past the deadline is not attempted,
        so retries stop once the issuing request would have timed out.
        """
        retrying = Retrying(
            retry=retry_if_exception_type(ClientError),
            stop=stop_after_attempt(self.MAX_ATTEMPTS) | stop_before_delay(self._retry_deadline),
            wait=wait_exponential_jitter(initial=0.2, max=2, jitter=0.2),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:similarity_search - Retry "
                f"{retry_state.attempt_number}/{self.MAX_ATTEMPTS} after throttling"
            ),
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                return self._vector_store.similarity_search_with_score(query=query, k=k)

    def similarity_search(self, query: str, k: int = 1) -> list[SimilarityMatch]:
        """
        Return the k closest reference entries for the query text.

        Args:
            query: Text to compare
            k: Number of results to return

        Returns:
            list[SimilarityMatch]: Results ordered from most to least similar

        Raises:
            ClientError: After max retries exhausted
        """
        results = self._search_with_retry(query=query, k=k)
        return [
            SimilarityMatch(
                matched_text=(doc.metadata or {}).get("text") or doc.page_content,
                score=score_from_cosine_distance(distance),
            )
            for doc, distance in results
        ]

    def add_texts(
        self,
        texts: list[str],
        metadatas: list[dict[str, Any]] | None = None,
        ids: list[str] | None = None,
    ) -> list[str]:
        """Upsert reference entries into the S3 Vectors index."""
        entry_ids = self._vector_store.add_texts(texts=texts, metadatas=metadatas, ids=ids)
        logger.info(f"{__name__}:add_texts - Upserted {len(entry_ids)} entries")
        return entry_ids
