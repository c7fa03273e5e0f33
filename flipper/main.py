"""
FastAPI application entry point.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flipper import __version__
from flipper.config import settings
from flipper.api import refactorings
from flipper.utils.logging import setup_logging, get_logger

# Configure structured logging
setup_logging(settings.log_level)

logger = get_logger(__name__)

# Create FastAPI application
app = FastAPI(
    title="if-flipper",
    description="Guard-clause and ternary refactorings for TypeScript and Java buffers",
    version=__version__
)

# Editor extensions call from arbitrary local origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "if-flipper refactoring API",
        "version": __version__,
        "docs": "/docs"
    }


# Include API routers
app.include_router(refactorings.router)


@app.on_event("startup")
async def startup_event():
    """Load language plugins on application startup."""
    logger.info("Starting if-flipper API")

    from flipper.services.refactoring_service import get_refactoring_service
    service = get_refactoring_service()
    logger.info(
        f"Refactoring service initialized for languages: "
        f"{service.plugin_manager.list_supported_languages()}"
    )


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
