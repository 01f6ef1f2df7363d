from contextlib import asynccontextmanager
import logging

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from csv_ingest.core.config import settings
from csv_ingest.core.errors import CsvUploadError, MissingFileError
from csv_ingest.core.limiter import limiter
from csv_ingest.core.logging import setup_logging
from csv_ingest.middleware.request_id import RequestIdMiddleware

setup_logging()

logger = logging.getLogger(__name__)

# Initialize Sentry error monitoring
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        environment=settings.APP_ENV,
        send_default_pii=False,
    )
    logger.info("Sentry initialized")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting CSV ingest API (env=%s)", settings.APP_ENV)
    yield
    # Shutdown: release pooled connections
    from csv_ingest.db.session import engine
    await engine.dispose()


app = FastAPI(
    title="CSV Person Ingest API",
    version="0.1.0",
    docs_url="/api/docs" if settings.APP_ENV != "production" else None,
    redoc_url="/api/redoc" if settings.APP_ENV != "production" else None,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(RequestIdMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CsvUploadError)
async def csv_upload_error_handler(request: Request, exc: CsvUploadError):
    logger.info("CSV upload rejected: %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # A text field posted as "file" is an upload without an attached file.
    if any(tuple(err.get("loc", ()))[:2] == ("body", "file") for err in exc.errors()):
        return await csv_upload_error_handler(request, MissingFileError())
    logger.info("Invalid request: %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=422, content={"error": "Requisição inválida."})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception: %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Erro interno do servidor."})


# ─── Routers ───
from csv_ingest.api.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health():
    return {"status": "ok", "env": settings.APP_ENV}
