"""
Vector store configuration settings.

Selects and configures the similarity index holding the reference profanity
corpus (FAISS for local development, S3 Vectors for production).

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for similarity queries
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (FAISS for dev, S3 Vectors for prod)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="faiss",
        description="Vector store type: 'faiss' for local dev, 's3' for production",
    )
    aws_region: str = Field(default="ap-southeast-2", description="AWS region for S3 Vectors")
    vectors_bucket: str = Field(
        default="profanity-dev-vectors",
        description="S3 Vectors bucket name",
    )
    index_name: str = Field(default="profanity", description="Index name")

    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
    embedding_dimension: int = Field(
        default=1024,
        description="Embedding vector dimension",
    )

    faiss_index_dir: str = Field(
        default="/tmp/.faiss_profanity_index",
        description="Local directory for the FAISS index",
    )
