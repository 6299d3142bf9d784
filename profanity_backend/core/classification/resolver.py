"""
Decision resolver.

Turns a scoring outcome into the final classification. Candidates are ranked
by score, then word-level before semantic-level, then chunk position, so equal
scores always resolve the same way.

Dependencies: profanity_backend.models, profanity_backend.core.exceptions
System role: Final stage of the classification pipeline
"""

from profanity_backend.core.classification.scorer import ScoringOutcome
from profanity_backend.core.exceptions import AggregateEmptyError
from profanity_backend.models.chunk import Match
from profanity_backend.models.classification import ClassificationResult


def _match_sort_key(match: Match) -> tuple[float, int, int]:
    return (-match.score, match.chunk.granularity.rank, match.chunk.position)


def resolve(outcome: ScoringOutcome) -> ClassificationResult:
    """
    Pick the most offending candidate, or the closest score if nothing was flagged.

    Args:
        outcome: Matches and flagged candidates of one request

    Returns:
        ClassificationResult: Final decision

    Raises:
        AggregateEmptyError: If no match carried a score
    """
    if outcome.flagged:
        top = min(outcome.flagged, key=lambda candidate: candidate.sort_key)
        return ClassificationResult(is_profane=True, score=top.score, flagged_for=top.text)

    scored = outcome.scored_matches
    if not scored:
        raise AggregateEmptyError(chunk_count=len(outcome.matches))

    closest = min(scored, key=_match_sort_key)
    return ClassificationResult(is_profane=False, score=closest.score)
