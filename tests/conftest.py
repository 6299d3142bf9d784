"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory similarity client fake, classifier settings, classifier factory
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import asyncio

import pytest

from profanity_backend.boundary.vdb.vector_schemas import SimilarityMatch
from profanity_backend.configs.classifier import ClassifierSettings
from profanity_backend.core.classification.classifier import ProfanityClassifier
from profanity_backend.core.exceptions import VectorStoreError


class FakeSimilarityClient:
    """
    In-memory stand-in for the similarity index.

    Lookup order for a query text: exact entry in `matches`, then
    `multi_word` for texts containing a space, then `default`.
    A `None` result means the index returned nothing.
    """

    def __init__(
        self,
        matches: dict[str, tuple[str, float]] | None = None,
        multi_word: tuple[str, float] | None = None,
        default: tuple[str, float] | None = ("neutral", 0.1),
        fail_on: str | None = None,
        delay: float = 0.0,
    ) -> None:
        self.matches = matches or {}
        self.multi_word = multi_word
        self.default = default
        self.fail_on = fail_on
        self.delay = delay
        self.calls: list[str] = []

    async def query(self, text: str) -> SimilarityMatch | None:
        self.calls.append(text)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_on is not None and self.fail_on in text:
            raise VectorStoreError("Similarity query failed", operation="query")

        if text in self.matches:
            entry = self.matches[text]
        elif self.multi_word is not None and " " in text:
            entry = self.multi_word
        else:
            entry = self.default

        if entry is None:
            return None
        return SimilarityMatch(matched_text=entry[0], score=entry[1])


@pytest.fixture
def fake_client_cls() -> type[FakeSimilarityClient]:
    """Provide the fake client class for per-test configuration."""
    return FakeSimilarityClient


@pytest.fixture
def classifier_settings() -> ClassifierSettings:
    """Provide reference classifier settings."""
    return ClassifierSettings(
        profanity_threshold=0.86,
        word_threshold=0.95,
        whitelist=["swear"],
        semantic_chunk_size=25,
        semantic_chunk_overlap=9,
        min_words=2,
        max_words=35,
        max_characters=1000,
        request_timeout_seconds=5.0,
    )


@pytest.fixture
def make_classifier(classifier_settings: ClassifierSettings):
    """Provide a factory building classifiers around a fake client."""

    def _make(client: FakeSimilarityClient, **overrides) -> ProfanityClassifier:
        settings = classifier_settings.model_copy(update=overrides)
        return ProfanityClassifier(client=client, settings=settings)

    return _make
