"""
FAISS vector store for local development.

Holds the reference profanity corpus in a local FAISS index persisted to disk.
Vectors are L2-normalized so distances convert to the same [0, 1] similarity
scale the production index reports.

Dependencies: faiss-cpu, langchain_community, backend embeddings wrapper
System role: Local similarity index for development and tests
"""

import logging
from pathlib import Path
from typing import Any

import faiss
from langchain_community.docstore.in_memory import InMemoryDocstore
from langchain_community.vectorstores import FAISS
from langchain_core.embeddings import Embeddings

from profanity_backend.boundary.vdb.embeddings_wrapper import FixedDimensionEmbeddings
from profanity_backend.boundary.vdb.vector_schemas import (
    SimilarityMatch,
    score_from_squared_l2,
)

logger = logging.getLogger(__name__)


class FAISSVectorsStore:
    """
    FAISS vector store for local development.

    Wraps LangChain FAISS and exposes the narrow search/add interface the
    similarity client and the seeding script rely on.
    """

    def __init__(
        self,
        index_dir: str = "/tmp/.faiss_profanity_index",
        index_name: str = "profanity",
        embedding_model_id: str = "models/gemini-embedding-001",
        embedding_dimension: int = 1024,
        embeddings: Embeddings | None = None,
    ) -> None:
        """
        Initialize FAISS vector store.

        Args:
            index_dir: Directory the index is persisted to
            index_name: Local index name
            embedding_model_id: Google embedding model ID
            embedding_dimension: Output dimension for embeddings
            embeddings: Prebuilt embeddings (overrides the Gemini defaults)
        """
        self._index_dir = Path(index_dir)
        self._index_name = index_name
        self._embedding_dimension = embedding_dimension
        self._embeddings = embeddings or FixedDimensionEmbeddings(
            model=embedding_model_id,
            output_dimensionality=embedding_dimension,
        )

        self._index_dir.mkdir(parents=True, exist_ok=True)
        self._vector_store = self._load_or_create_index()

    def _load_or_create_index(self) -> FAISS:
        """Load existing FAISS index or create an empty one."""
        index_path = self._index_dir / f"{self._index_name}.faiss"
        if index_path.exists():
            logger.info(f"{__name__}:_load_or_create_index - Loading index from {self._index_dir}")
            return FAISS.load_local(
                str(self._index_dir),
                self._embeddings,
                index_name=self._index_name,
                allow_dangerous_deserialization=True,
                normalize_L2=True,
            )

        logger.info(
            f"{__name__}:_load_or_create_index - Creating empty index "
            f"dimension={self._embedding_dimension}"
        )
        return FAISS(
            embedding_function=self._embeddings,
            index=faiss.IndexFlatL2(self._embedding_dimension),
            docstore=InMemoryDocstore(),
            index_to_docstore_id={},
            normalize_L2=True,
        )

    @property
    def size(self) -> int:
        return self._vector_store.index.ntotal

    def similarity_search(self, query: str, k: int = 1) -> list[SimilarityMatch]:
        """
        Return the k closest reference entries for the query text.

        Args:
            query: Text to compare
            k: Number of results to return

        Returns:
            list[SimilarityMatch]: Results ordered from most to least similar
        """
        if self.size == 0:
            return []

        results = self._vector_store.similarity_search_with_score(query=query, k=k)

        matches = []
        for doc, distance in results:
            metadata = doc.metadata or {}
            matches.append(
                SimilarityMatch(
                    matched_text=metadata.get("text") or doc.page_content,
                    score=score_from_squared_l2(distance),
                )
            )
        return matches

    def add_texts(
        self,
        texts: list[str],
        metadatas: list[dict[str, Any]] | None = None,
        ids: list[str] | None = None,
    ) -> list[str]:
        """
        Upsert reference entries into the index and persist it.

        Entries whose ID is already indexed are replaced.

        Args:
            texts: Entry texts
            metadatas: Entry metadata
            ids: Entry IDs

        Returns:
            list[str]: Added entry IDs
        """
        if ids:
            indexed = set(self._vector_store.index_to_docstore_id.values())
            stale = [entry_id for entry_id in ids if entry_id in indexed]
            if stale:
                self._vector_store.delete(ids=stale)
                logger.info(f"{__name__}:add_texts - Replacing {len(stale)} existing entries")

        entry_ids = self._vector_store.add_texts(texts=texts, metadatas=metadatas, ids=ids)
        self._vector_store.save_local(str(self._index_dir), index_name=self._index_name)
        logger.info(f"{__name__}:add_texts - Added {len(entry_ids)} entries")
        return entry_ids
