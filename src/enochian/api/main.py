"""FastAPI application."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from enochian import __version__
from enochian.api.routes import router
from enochian.pipeline.enhanced import EnhancedTranslator


def create_app(translator: Optional[EnhancedTranslator] = None) -> FastAPI:
    """Build the API app.

    Without a translator, one is loaded from the configured data
    directory on first use.
    """
    app = FastAPI(
        title="Enochian Translator",
        description="English to Enochian translation with letter-root analysis",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.translator = translator

    # CORS for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Enochian Translator",
            "version": __version__,
            "docs": "/docs",
            "api": "/api/v1",
        }

    return app


app = create_app()
