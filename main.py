"""
FastAPI Application Entry Point

Integrates:
  - News search handler
  - Article summary / question handlers
  - Health checks
  - Middleware for logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import articles_router, news_router
from config import Config
from infra import bootstrap_infrastructure

# Setup logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    infra = bootstrap_infrastructure()
    logger.info("=" * 60)
    logger.info("NewsLens API starting up...")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    logger.info(f"Backends: {infra!r}")
    missing = Config.missing_secrets()
    if missing:
        logger.warning(f"Missing secrets: {', '.join(missing)}")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("NewsLens API shutting down...")


# Create FastAPI app
app = FastAPI(
    title="NewsLens API",
    description="News search with AI summaries and Q&A",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS also answers OPTIONS preflight requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render framework HTTP errors in the {"error": ...} shape."""
    if exc.status_code == 405 and request.url.path.startswith("/api/"):
        message = "POST method required."
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


# Include routers
app.include_router(news_router)
app.include_router(articles_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Readiness health check (Kubernetes readiness probe)."""
    missing = Config.missing_secrets()
    if missing:
        return {"status": "not_ready", "reason": f"missing {', '.join(missing)}"}
    return {"status": "ready"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "NewsLens API",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "fetch_news": "POST /api/fetch-news",
            "summarize_article": "POST /api/summarize-article",
            "answer_question": "POST /api/answer-question",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=Config.APP_PORT,
        reload=Config.ENVIRONMENT == "development",
    )
