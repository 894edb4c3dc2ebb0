"""FastAPI application initialization and configuration."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from research_chat import __version__
from research_chat.api.routes import (
    ai_router,
    chat_router,
    health_router,
    parse_router,
    research_router,
)
from research_chat.chat.service import ChatService
from research_chat.chat.sessions import SessionStore
from research_chat.config.logging_config import configure_logging
from research_chat.config.settings import Settings, get_settings
from research_chat.parsing.titles import ParserConfig

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for FastAPI app.

        Handles startup and shutdown events.
        """
        configure_logging(settings.debug, settings.log_level, settings.log_json)
        logger.info("Starting up Research Chat API...", llm_mode=settings.llm_mode)

        parser_config = ParserConfig.from_settings(settings)
        app.state.settings = settings
        app.state.chat_service = ChatService(settings=settings, parser_config=parser_config)
        app.state.session_store = SessionStore(
            limit=settings.session_limit, history_limit=settings.session_history_limit
        )

        logger.info("Research Chat API started successfully", models=settings.model_chain)

        yield

        logger.info("Research Chat API shutdown complete", sessions=len(app.state.session_store))

    app = FastAPI(
        title="Research Chat API",
        description="Chat assistant with research title suggestions and link extraction",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health_router)
    app.include_router(ai_router)
    app.include_router(chat_router)
    app.include_router(research_router)
    app.include_router(parse_router)

    logger.info("FastAPI app created")

    return app


# Create app instance
app = create_app()
