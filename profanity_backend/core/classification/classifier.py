"""
Profanity classifier.

Orchestrates the classification pipeline for one message and bounds the
similarity fan-out by the request timeout.

Dependencies: profanity_backend.core.classification, profanity_backend.configs
System role: Classification orchestration layer
"""

import asyncio
import logging

from profanity_backend.boundary.vdb.similarity_client import SimilarityQueryClient
from profanity_backend.configs.classifier import ClassifierSettings
from profanity_backend.core.classification.chunker import MessageChunker
from profanity_backend.core.classification.normalizer import normalize
from profanity_backend.core.classification.resolver import resolve
from profanity_backend.core.classification.scorer import ChunkScorer
from profanity_backend.core.exceptions import (
    ClassificationTimeoutError,
    EmptyAfterNormalizationError,
)
from profanity_backend.models.classification import ClassificationResult
from profanity_backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class ProfanityClassifier:
    """
    Classify messages by nearest-neighbour similarity to known profanity.

    Holds no per-request state, so one instance serves concurrent requests.
    """

    def __init__(
        self,
        client: SimilarityQueryClient,
        settings: ClassifierSettings | None = None,
        chunker: MessageChunker | None = None,
    ) -> None:
        """
        Initialize classifier.

        Args:
            client: Similarity query client shared across requests
            settings: Thresholds, whitelist and timeout
            chunker: Custom chunker (defaults to settings' window sizes)
        """
        self.settings = settings or ClassifierSettings()
        self.chunker = chunker or MessageChunker(
            chunk_size=self.settings.semantic_chunk_size,
            chunk_overlap=self.settings.semantic_chunk_overlap,
        )
        self.scorer = ChunkScorer(
            client=client,
            word_threshold=self.settings.word_threshold,
            semantic_threshold=self.settings.profanity_threshold,
        )

    async def classify(self, message: str) -> ClassificationResult:
        """
        Classify an already validated message.

        Args:
            message: Raw message text

        Returns:
            ClassificationResult: Decision with the most offending match

        Raises:
            EmptyAfterNormalizationError: If every token is whitelisted
            ClassificationTimeoutError: If queries exceed the request timeout
            VectorStoreError: If any similarity query fails
            AggregateEmptyError: If no query returned a score
        """
        text = normalize(message, self.settings.whitelist)
        if not text:
            raise EmptyAfterNormalizationError()

        word_chunks = self.chunker.to_word_chunks(text)
        semantic_chunks = self.chunker.to_semantic_chunks(text)

        timeout = self.settings.request_timeout_seconds
        try:
            outcome = await asyncio.wait_for(
                self.scorer.score(word_chunks, semantic_chunks),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            logger.warning(
                f"{__name__}:classify - Timed out after {timeout}s",
                extra={"chunk_count": len(word_chunks) + len(semantic_chunks)},
            )
            raise ClassificationTimeoutError(timeout) from e

        result = resolve(outcome)
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:classify - is_profane={result.is_profane}, score={result.score:.4f}",
            word_chunks=len(word_chunks),
            semantic_chunks=len(semantic_chunks),
            flagged=len(outcome.flagged),
            flagged_for=result.flagged_for,
        )
        return result
