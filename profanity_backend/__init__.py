"""Vector-similarity profanity classification service."""

__version__ = "0.1.0"
