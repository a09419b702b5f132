import logging
import struct
from typing import Any, Callable

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import language_v1

from src.exceptions import ProviderUnavailableError, SentimentAnalysisError

logger = logging.getLogger(__name__)

DOCUMENT_LANGUAGE = "en"


def shortest_float32(value: float) -> float:
    """Return the shortest decimal that maps to the same float32 as ``value``.

    The language service reports scores as 32-bit floats, so a score of 0.8
    arrives here as 0.800000011920929.
    """
    try:
        packed = struct.pack("<f", value)
    except OverflowError:
        return value
    for digits in range(1, 10):
        candidate = float(format(value, f".{digits}g"))
        if struct.pack("<f", candidate) == packed:
            return candidate
    return value


class LanguageProvider:
    """Thin adapter over the Cloud Natural Language sentiment endpoint."""

    def __init__(
            self,
            client_factory: Callable[[], Any] = language_v1.LanguageServiceAsyncClient,
    ):
        self.client_factory = client_factory
        self._client = None

    def _get_client(self):
        if self._client is None:
            try:
                self._client = self.client_factory()
            except (GoogleAuthError, GoogleAPIError, OSError, ValueError) as exc:
                raise ProviderUnavailableError(
                    message="Failed to create language client",
                    details={"error": str(exc)},
                ) from exc
            logger.info("Language client created")
        return self._client

    async def analyze_sentiment_score(self, text: str) -> float:
        client = self._get_client()
        document = language_v1.Document(
            content=text,
            type_=language_v1.Document.Type.PLAIN_TEXT,
            language=DOCUMENT_LANGUAGE,
        )
        try:
            response = await client.analyze_sentiment(document=document, retry=None)
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise SentimentAnalysisError(
                message="Failed to analyze sentiment",
                details={"error": str(exc)},
            ) from exc

        return shortest_float32(response.document_sentiment.score)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.transport.close()
            self._client = None
            logger.info("Language client closed")
