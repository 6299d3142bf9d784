"""
Profanity classification pipeline.

raw text -> normalize -> word + semantic chunks -> concurrent similarity
queries -> threshold reduction -> decision.
"""

from profanity_backend.core.classification.chunker import MessageChunker
from profanity_backend.core.classification.classifier import ProfanityClassifier
from profanity_backend.core.classification.normalizer import count_words, normalize
from profanity_backend.core.classification.resolver import resolve
from profanity_backend.core.classification.scorer import ChunkScorer, ScoringOutcome

__all__ = [
    "ChunkScorer",
    "MessageChunker",
    "ProfanityClassifier",
    "ScoringOutcome",
    "count_words",
    "normalize",
    "resolve",
]
