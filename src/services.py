import asyncio
import logging

from src.exceptions import ProviderUnavailableError, SentimentAnalysisError
from src.models import (
    AnalysisFailure,
    AnalysisOutcome,
    FailureKind,
    SentimentLabel,
    SentimentResult,
)
from src.provider import LanguageProvider

logger = logging.getLogger(__name__)


def classify(score: float) -> SentimentResult:
    """Map a signed document score to a label and a non-negative magnitude."""
    if score > 0:
        return SentimentResult(sentiment=SentimentLabel.POSITIVE, sentiment_score=score)
    if score < 0:
        return SentimentResult(sentiment=SentimentLabel.NEGATIVE, sentiment_score=-score)
    return SentimentResult(sentiment=SentimentLabel.NEUTRAL, sentiment_score=0.0)


class SentimentAnalysisService:
    def __init__(self, provider: LanguageProvider, request_timeout: float | None = None):
        self.provider = provider
        self.request_timeout = request_timeout

    async def analyze(self, text: str) -> AnalysisOutcome:
        try:
            score = await asyncio.wait_for(
                self.provider.analyze_sentiment_score(text),
                timeout=self.request_timeout,
            )
        except ProviderUnavailableError as exc:
            return AnalysisFailure(
                kind=FailureKind.CLIENT_UNAVAILABLE,
                message=str(exc),
                details=exc.details,
            )
        except SentimentAnalysisError as exc:
            return AnalysisFailure(
                kind=FailureKind.ANALYSIS_FAILED,
                message=str(exc),
                details=exc.details,
            )
        except asyncio.TimeoutError:
            return AnalysisFailure(
                kind=FailureKind.TIMEOUT,
                message="Sentiment analysis request timed out",
                details={"timeout": self.request_timeout},
            )
        except Exception as exc:
            logger.exception("Unexpected error from language provider")
            return AnalysisFailure(
                kind=FailureKind.ANALYSIS_FAILED,
                message="Unexpected error during sentiment analysis",
                details={"error": str(exc)},
            )

        return classify(score)
