#!/usr/bin/env python3
"""
RPA Match API - FastAPI Application

Ranks elder-care residences (RPA) for a patient profile and relays
availability reports and contact requests.

Usage:
    uv run python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from core.config_loader import get_config
from core.matcher.errors import MatchingError
from .exceptions import (
    ServiceException,
    service_exception_handler,
    matching_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    search_router,
    residences_router,
    contact_router
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="RPA Match API",
    description="API for matching patients with elder-care residences",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Register exception handlers
app.add_exception_handler(MatchingError, matching_exception_handler)
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(search_router)
app.include_router(residences_router)
app.include_router(contact_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "rpa-match"}


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting RPA Match API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
