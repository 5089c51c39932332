"""
FastAPI application initialization.
Siksha Mantra Assistant API for the web chat widget.
"""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sikshabot.core.config import settings
from sikshabot.core.logging_config import logger
from sikshabot.api.routes import router, system_router
from sikshabot.services.corpus_loader import load_corpus
from sikshabot.services.history_service import HistoryService
from sikshabot.services.intent_matcher import IntentMatcher
from sikshabot.utils.exceptions import ChatbotException, InvalidInputError
from sikshabot.utils.response_formatter import error_response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the corpus once and build the shared matcher; log shutdown."""
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")
    if app.state.matcher is None:
        app.state.matcher = IntentMatcher(load_corpus())
    logger.info(
        f"Matcher ready: {len(app.state.matcher.corpus.intents)} intents, "
        f"{len(app.state.matcher.corpus.faq)} FAQ entries"
    )
    yield
    logger.info(f"Shutting down {settings.api_title}")


def create_app(
    matcher: Optional[IntentMatcher] = None,
    history_service: Optional[HistoryService] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        matcher: Pre-built matcher; when omitted the corpus is loaded at startup
        history_service: Pre-built history store; a fresh one is created otherwise
    """
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description=settings.api_description,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.matcher = matcher
    app.state.history_service = history_service or HistoryService()

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed request bodies keep the {success, message} envelope."""
        logger.warning(f"Request validation failed on {request.url.path}: {exc.errors()}")
        details = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
            for error in exc.errors()
        )
        return JSONResponse(
            status_code=422,
            content=error_response("Invalid request", details)
        )

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        """Reject blank or malformed input."""
        logger.warning(f"InvalidInputError: {exc}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_response(str(exc))
        )

    @app.exception_handler(ChatbotException)
    async def chatbot_exception_handler(request: Request, exc: ChatbotException):
        """Handle chatbot-specific exceptions."""
        logger.error(f"ChatbotException: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response("Failed to get chatbot response", str(exc))
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unexpected error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response(
                "An unexpected error occurred",
                str(exc) if settings.environment == "development" else None
            )
        )

    app.include_router(system_router, tags=["System"])
    app.include_router(router, prefix=settings.api_prefix, tags=["Chatbot"])

    # Health check for load balancers/monitoring
    @app.get("/ping")
    async def ping():
        """Simple ping endpoint for monitoring."""
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "sikshabot.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development"
    )
