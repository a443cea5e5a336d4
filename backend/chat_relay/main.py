"""
Chat Relay - Main FastAPI Application
"""

import logging
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from .config import settings
from .api import relay_router, register_exception_handlers
from .core import SessionStore, get_session_store
from .core.logging_config import setup_logging
from .middleware import RequestLoggingMiddleware

# Logger will be initialized after setup_logging() is called
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    setup_logging(settings)

    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"LLM provider: {settings.llm_provider}, model: {settings.llm_model}")
    logger.info(f"Log level: {settings.log_level.upper()}")
    logger.info(f"Debug mode: {settings.debug}")
    yield
    logger.info(f"Shutting down {settings.app_name}, {len(get_session_store())} sessions discarded")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Relays chat turns to an OpenAI-compatible completion API with in-memory sessions",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add request logging middleware (after CORS)
if settings.log_api_requests:
    app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)
app.include_router(relay_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health_check(store: SessionStore = Depends(get_session_store)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "sessions": len(store),
        "version": settings.app_version
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "chat_relay.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
