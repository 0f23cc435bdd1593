"""Main FastAPI application module.

This module initializes the FastAPI application, registers all route handlers
and renders every error as a JSON body with an ``error`` field.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.logging_config import setup_logging
from config import (
    CORS_ALLOWED_ORIGINS,
    API_HOST,
    API_PORT,
)
from api.routes import auth, records, viewers

# Setup logging
setup_logging()

logger = logging.getLogger(__name__)

# Initialize FastAPI application
app = FastAPI(
    title="Family Schedule API",
    description="Schedules, exams and notes for students, shared read-only with family.",
    version="1.0.0",
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials="*" not in CORS_ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Register route handlers
app.include_router(auth.router)
app.include_router(viewers.router)
for router in records.owner_routers:
    app.include_router(router)
app.include_router(records.public_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation errors as {"error": ..., "details": [...]}."""
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


@app.get("/", summary="API root", tags=["Info"])
def root() -> dict:
    """API root, returns API information.

    Returns:
        Dictionary with API name, version and documentation links.
    """
    return {
        "name": "Family Schedule API",
        "version": "1.0.0",
        "message": "Server is running",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc",
        },
        "health": "/health",
    }


@app.get("/health", summary="Health check", tags=["Health"])
def health() -> dict:
    """Health check endpoint.

    Returns:
        Dictionary with status "ok".
    """
    return {"status": "ok"}


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    logger.info("Starting Family Schedule API on http://%s:%s", API_HOST, API_PORT)
    uvicorn.run("app:app", host=API_HOST, port=API_PORT, reload=True)
