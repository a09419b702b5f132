import logging
import time
import uuid
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config import settings
from src.docs import SWAGGER_BODY
from src.models import AnalysisFailure, SentimentAnalysisRequest, SentimentResult
from src.provider import LanguageProvider
from src.services import SentimentAnalysisService

logging.basicConfig(
    level=settings.server.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def exception_container(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            return Response(status_code=405, headers=exc.headers)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return Response(status_code=500)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.language_provider = LanguageProvider()
    app.state.sentiment_service = SentimentAnalysisService(
        provider=app.state.language_provider,
        request_timeout=settings.language.request_timeout,
    )

    yield

    await app.state.language_provider.aclose()


app = FastAPI(
    title="Sentiment Analysis API",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

exception_container(app)


def get_service(request: Request) -> SentimentAnalysisService:
    return request.app.state.sentiment_service


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    request_id = uuid.uuid4().hex[:8]
    logger.info(f"[{request_id}] Incoming request: {request.method} {request.url}")
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.info(
        f"[{request_id}] Request completed: {request.method} {request.url} - "
        f"Status: {response.status_code} - Time: {process_time:.5f}s"
    )
    return response


@app.post("/analyze", response_model=SentimentResult)
async def analyze_sentiment(
        request: Request,
        service: SentimentAnalysisService = Depends(get_service),
):
    try:
        request_data = SentimentAnalysisRequest.from_json_body(await request.body())
    except (ValidationError, UnicodeDecodeError):
        return Response(status_code=400)

    outcome = await service.analyze(request_data.text)
    if isinstance(outcome, AnalysisFailure):
        logger.error(f"Sentiment analysis failed ({outcome.kind}): {outcome.message} - Details: {outcome.details}")
        return Response(status_code=500)
    return outcome


@app.get("/healthcheck")
async def health_check():
    return Response(status_code=200)


@app.get("/docs")
async def docs():
    return Response(content=SWAGGER_BODY, media_type="application/json")


def run() -> None:
    logger.info(f"Starting Sentiment Analysis API server on port {settings.server.port}...")
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.server.log_level.lower(),
    )


if __name__ == "__main__":
    run()
