import math

import pytest
from unittest.mock import AsyncMock

from src.exceptions import ProviderUnavailableError, SentimentAnalysisError
from src.models import AnalysisFailure, FailureKind, SentimentLabel, SentimentResult
from src.services import SentimentAnalysisService, classify


@pytest.mark.parametrize(
    "score, label, magnitude",
    [
        (0.0, SentimentLabel.NEUTRAL, 0.0),
        (-0.0, SentimentLabel.NEUTRAL, 0.0),
        (0.0000001, SentimentLabel.POSITIVE, 0.0000001),
        (-0.0000001, SentimentLabel.NEGATIVE, 0.0000001),
        (1.0, SentimentLabel.POSITIVE, 1.0),
        (-1.0, SentimentLabel.NEGATIVE, 1.0),
        (0.25, SentimentLabel.POSITIVE, 0.25),
    ],
)
def test_classify(score, label, magnitude):
    result = classify(score)

    assert result.sentiment == label
    assert result.sentiment_score == magnitude
    assert not math.copysign(1.0, result.sentiment_score) < 0


def test_classify_nan_is_neutral():
    assert classify(float("nan")) == SentimentResult(sentiment=SentimentLabel.NEUTRAL, sentiment_score=0.0)


@pytest.mark.asyncio
async def test_analyze_returns_classified_result():
    provider = AsyncMock()
    provider.analyze_sentiment_score.return_value = -0.3
    service = SentimentAnalysisService(provider=provider)

    outcome = await service.analyze("not great")

    assert outcome == SentimentResult(sentiment=SentimentLabel.NEGATIVE, sentiment_score=0.3)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, kind",
    [
        (ProviderUnavailableError("no client", details={"error": "creds"}), FailureKind.CLIENT_UNAVAILABLE),
        (SentimentAnalysisError("rpc failed", details={"error": "503"}), FailureKind.ANALYSIS_FAILED),
        (RuntimeError("boom"), FailureKind.ANALYSIS_FAILED),
    ],
)
async def test_analyze_tags_failures(error, kind):
    provider = AsyncMock()
    provider.analyze_sentiment_score.side_effect = error
    service = SentimentAnalysisService(provider=provider)

    outcome = await service.analyze("text")

    assert isinstance(outcome, AnalysisFailure)
    assert outcome.kind == kind
    assert outcome.details


@pytest.mark.asyncio
async def test_analyze_failure_keeps_provider_details():
    provider = AsyncMock()
    provider.analyze_sentiment_score.side_effect = SentimentAnalysisError(
        "rpc failed", details={"error": "deadline exceeded"}
    )
    service = SentimentAnalysisService(provider=provider)

    outcome = await service.analyze("text")

    assert outcome.message == "rpc failed"
    assert outcome.details == {"error": "deadline exceeded"}
