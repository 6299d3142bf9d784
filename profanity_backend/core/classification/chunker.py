"""
Message chunker.

Splits normalized text into single-word chunks and overlapping semantic
windows. Windowing is delegated to a LangChain RecursiveCharacterTextSplitter
that only breaks at spaces, so a window never cuts through a token.

Dependencies: langchain_text_splitters, profanity_backend.models
System role: Second stage of the classification pipeline
"""

from typing import Protocol

from langchain_text_splitters import RecursiveCharacterTextSplitter

from profanity_backend.models.chunk import Chunk, ChunkGranularity


class WindowSplitter(Protocol):
    def split_text(self, text: str) -> list[str]:
        ...


class MessageChunker:
    """Produce word-level and semantic-level chunks for a message."""

    def __init__(
        self,
        chunk_size: int = 25,
        chunk_overlap: int = 9,
        splitter: WindowSplitter | None = None,
    ) -> None:
        """
        Initialize chunker with splitter configuration.

        Args:
            chunk_size: Target semantic window size in characters
            chunk_overlap: Overlap between consecutive windows
            splitter: Custom window splitter (overrides size/overlap)
        """
        self._splitter = splitter or RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=[" "],
            length_function=len,
        )

    def to_word_chunks(self, text: str) -> list[Chunk]:
        return [
            Chunk(text=token, granularity=ChunkGranularity.WORD, position=position)
            for position, token in enumerate(text.split())
        ]

    def to_semantic_chunks(self, text: str) -> list[Chunk]:
        """
        Overlapping windows over the text.

        Single-token and empty texts have no multi-word context and yield no
        windows.
        """
        if len(text.split()) <= 1:
            return []

        windows = [window for window in self._splitter.split_text(text) if window.strip()]
        return [
            Chunk(text=window, granularity=ChunkGranularity.SEMANTIC, position=position)
            for position, window in enumerate(windows)
        ]
