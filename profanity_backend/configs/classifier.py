"""
Classifier configuration settings.

Thresholds, whitelist, semantic window sizes and message limits used by the
classification pipeline. PROFANITY_THRESHOLD and WHITELIST keep their
deployment names so existing environments keep working.

Dependencies: pydantic, pydantic_settings
System role: Classification tuning surface
"""

import json
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class ClassifierSettings(BaseSettings):
    """Classification thresholds and input limits."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    profanity_threshold: float = Field(
        default=0.86,
        description="Similarity a semantic window must exceed to be flagged",
    )
    word_threshold: float = Field(
        default=0.95,
        description="Similarity a single word must exceed to be flagged",
    )
    whitelist: Annotated[list[str], NoDecode] = Field(
        default=["swear"],
        description="Tokens dropped before classification (case-insensitive)",
    )

    semantic_chunk_size: int = Field(
        default=25,
        description="Target semantic window size in characters",
        gt=0,
    )
    semantic_chunk_overlap: int = Field(
        default=9,
        description="Overlap between consecutive semantic windows in characters",
        ge=0,
    )

    min_words: int = Field(default=2, description="Minimum whitespace-delimited tokens", ge=1)
    max_words: int = Field(default=35, description="Maximum whitespace-delimited tokens", ge=1)
    max_characters: int = Field(default=1000, description="Maximum message length", ge=1)

    request_timeout_seconds: float = Field(
        default=10.0,
        description="Budget for all similarity queries of a single request",
        gt=0,
    )
    query_workers: int = Field(
        default=16,
        description="Threads available for blocking similarity queries across all requests",
        gt=0,
    )

    @field_validator("whitelist", mode="before")
    @classmethod
    def _parse_whitelist(cls, value):
        """Accept a JSON list or a comma-separated string."""
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                value = json.loads(value)
            else:
                value = value.split(",")
        return [str(word).strip().lower() for word in value if str(word).strip()]

    @model_validator(mode="after")
    def _check_consistency(self) -> "ClassifierSettings":
        if self.word_threshold <= self.profanity_threshold:
            raise ValueError("word_threshold must be greater than profanity_threshold")
        if self.semantic_chunk_overlap >= self.semantic_chunk_size:
            raise ValueError("semantic_chunk_overlap must be smaller than semantic_chunk_size")
        if self.min_words > self.max_words:
            raise ValueError("min_words cannot exceed max_words")
        return self
