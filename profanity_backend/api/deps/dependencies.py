"""
Dependency injection container.

Factory functions for FastAPI dependencies. The vector store, similarity
client and classifier are built once and shared by all requests.

Dependencies: profanity_backend.configs, profanity_backend.core, profanity_backend.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from profanity_backend.configs import Settings, get_settings
from profanity_backend.core.classification.classifier import ProfanityClassifier


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._vector_store = None
        self._similarity_client = None
        self._classifier = None

    @property
    def vector_store(self):
        """Get cached vector store."""
        if self._vector_store is None:
            from profanity_backend.boundary.vdb.vector_store_factory import get_vector_store

            self._vector_store = get_vector_store()
        return self._vector_store

    @property
    def similarity_client(self):
        """Get cached similarity query client."""
        if self._similarity_client is None:
            from profanity_backend.boundary.vdb.similarity_client import (
                VectorStoreSimilarityClient,
            )

            self._similarity_client = VectorStoreSimilarityClient(
                self.vector_store,
                max_workers=get_settings().classifier.query_workers,
            )
        return self._similarity_client

    @property
    def classifier(self) -> ProfanityClassifier:
        """Get cached classifier."""
        if self._classifier is None:
            self._classifier = ProfanityClassifier(
                client=self.similarity_client,
                settings=get_settings().classifier,
            )
        return self._classifier

    @property
    def is_ready(self) -> bool:
        return self._similarity_client is not None

    def clear(self) -> None:
        """Clear all cached instances and release the query threads."""
        if self._similarity_client is not None:
            self._similarity_client.close()
        self._vector_store = None
        self._similarity_client = None
        self._classifier = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_classifier() -> ProfanityClassifier:
    """
    Get the shared profanity classifier.

    Returns:
        ProfanityClassifier: Classifier bound to the configured vector store
    """
    return get_service_cache().classifier
