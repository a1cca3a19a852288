"""
FastAPI REST API for Newsroom.

Provides endpoints for:
- Health checks
- News reading and administration
- Newsletter channels and broadcasting
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from newsroom import __version__
from newsroom.adapters.base import ChannelTransport
from newsroom.api.routes import channels, health, news, newsletter
from newsroom.config import get_settings
from newsroom.exceptions import InvalidReferenceError, NotFoundError

logger = logging.getLogger(__name__)


def create_app(transport: ChannelTransport | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        transport: Newsletter transport; started and stopped with the app.
            Without one, the newsletter endpoint answers 503.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API starting up...")
        if transport is not None:
            await transport.start()
        yield
        if transport is not None:
            await transport.stop()
        logger.info("API shutting down...")

    app = FastAPI(
        title="Newsroom API",
        description="REST API for multilingual news and newsletter broadcasting",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.log_level == "DEBUG" else None,
        redoc_url="/redoc" if settings.log_level == "DEBUG" else None,
    )
    app.state.transport = transport

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.message},
        )

    @app.exception_handler(InvalidReferenceError)
    async def invalid_reference_handler(
        request: Request, exc: InvalidReferenceError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message},
        )

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(news.router, prefix="/api/news", tags=["News"])
    app.include_router(channels.router, prefix="/api/channels", tags=["Channels"])
    app.include_router(newsletter.router, prefix="/api/newsletter", tags=["Newsletter"])

    return app


async def run_api_server(transport: ChannelTransport | None = None) -> None:
    """Run the API server."""
    settings = get_settings()
    app = create_app(transport)

    config = uvicorn.Config(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)

    logger.info(f"Starting API server on {settings.api_host}:{settings.api_port}")
    await server.serve()
