"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

Pins every embed call to one vector size so stored reference entries and
query chunks always land in the same space.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency for the similarity index
"""

import logging
from typing import Any

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings that always requests the configured dimension."""

    _output_dimensionality: int = 1024

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1024,
        **kwargs: Any,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Dimension requested on every call
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    def embed_documents(self, texts: list[str], **kwargs: Any) -> list[list[float]]:
        kwargs["output_dimensionality"] = (
            kwargs.get("output_dimensionality") or self._output_dimensionality
        )
        return super().embed_documents(texts, **kwargs)

    def embed_query(self, text: str, **kwargs: Any) -> list[float]:
        kwargs["output_dimensionality"] = (
            kwargs.get("output_dimensionality") or self._output_dimensionality
        )
        return super().embed_query(text, **kwargs)
