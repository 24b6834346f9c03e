"""
Mind Map Generator: API
========================
FastAPI entry point.
  • Global exception handler: unexpected errors always come back as JSON
  • Request validation errors mapped to 400 {error, details}
  • AI-backed endpoints fall back to deterministic content, never to an error
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mindmap_ai.core.config import settings
from mindmap_ai.core.log import setup_logging
from mindmap_ai.schemas.common import ErrorResponse, HealthResponse
from mindmap_ai.services import ai_client
from mindmap_ai.api.endpoints import content, generation

# ── Logging ──────────────────────────────────────────────────────────────────
setup_logging()
logger = logging.getLogger(__name__)

# ── App ──────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="AI Mind Map Generator",
    description=(
        "Turn a text prompt or an uploaded document into a mind map, "
        "and expand any node into detailed learning content."
    ),
    version="1.0.0",
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Invalid request on {request.url.path}: {exc.errors()}")
    body = ErrorResponse(error="Invalid request", details=str(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all: every unhandled exception returns a clean JSON envelope."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    body = ErrorResponse(error="An internal server error occurred.", details=str(exc))
    return JSONResponse(status_code=500, content=body.model_dump())


# ── CORS ─────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Health Check ─────────────────────────────────────────────────────────────
@app.get("/api/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    ai_status = "connected" if ai_client.is_configured() else "fallback mode"
    return HealthResponse(
        status="Server is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
        ai_status=ai_status,
        gemini_status=ai_status,
        provider=ai_client.provider_name(),
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(generation.router, prefix="/api")
app.include_router(content.router, prefix="/api")

if ai_client.is_configured():
    logger.info(f"[STARTUP] ✓ AI ready ({ai_client.provider_name()})")
else:
    logger.warning("[STARTUP] ✗ AI not configured, every endpoint serves fallback content")
