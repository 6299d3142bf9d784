"""
Classification result models.

ClassificationResult is the pipeline's terminal artifact; ClassifyResponse is
its JSON representation on the wire.

Dependencies: pydantic
System role: Classification API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class ClassificationResult(BaseModel):
    """Outcome of classifying a single message."""

    model_config = ConfigDict(frozen=True)

    is_profane: bool
    score: float
    flagged_for: str | None = None


class ClassifyResponse(BaseModel):
    """Response schema for the classification endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    is_profanity: bool = Field(alias="isProfanity")
    score: float
    flagged_for: str | None = Field(default=None, alias="flaggedFor")

    @classmethod
    def from_result(cls, result: ClassificationResult) -> "ClassifyResponse":
        return cls(
            is_profanity=result.is_profane,
            score=result.score,
            flagged_for=result.flagged_for,
        )

    def to_payload(self) -> dict:
        """Serialize with wire names, omitting flaggedFor for clean messages."""
        return self.model_dump(by_alias=True, exclude_none=True)
