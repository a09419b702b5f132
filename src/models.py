from enum import StrEnum

from pydantic import BaseModel, Field, field_serializer, field_validator


class SentimentLabel(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class FailureKind(StrEnum):
    CLIENT_UNAVAILABLE = "client_unavailable"
    ANALYSIS_FAILED = "analysis_failed"
    TIMEOUT = "timeout"


class SentimentAnalysisRequest(BaseModel):
    text: str = Field("", description="Text to analyze")

    @field_validator("text", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value

    @classmethod
    def from_json_body(cls, body: bytes) -> "SentimentAnalysisRequest":
        """Decode a raw request body whatever its Content-Type; a JSON `null` is the empty request."""
        if body.strip() == b"null":
            return cls()
        return cls.model_validate_json(body.decode("utf-8"))


class SentimentResult(BaseModel):
    sentiment: SentimentLabel
    sentiment_score: float = Field(..., ge=0.0)

    @field_serializer("sentiment_score")
    def integral_score_as_int(self, value: float) -> float | int:
        # 0.0 and 1.0 are written as 0 and 1
        return int(value) if value.is_integer() else value


class AnalysisFailure(BaseModel):
    kind: FailureKind
    message: str
    details: dict = Field(default_factory=dict)


AnalysisOutcome = SentimentResult | AnalysisFailure
