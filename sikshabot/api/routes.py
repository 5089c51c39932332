"""
API routes for the chatbot service.
"""
import time
from fastapi import APIRouter, Depends, Request, status
from sikshabot.models.schemas import (
    ChatMessageRequest,
    ClearHistoryRequest,
    ErrorResponse,
    HealthCheckResponse,
    StatusData,
    SuggestionsData
)
from sikshabot.core.config import settings
from sikshabot.core.logging_config import logger
from sikshabot.services.intent_matcher import IntentMatcher
from sikshabot.services.history_service import HistoryService
from sikshabot.utils.exceptions import InvalidInputError
from sikshabot.utils.response_formatter import format_chat_reply, success_response


RULE_BASED_PROVIDER = "rule_based"

router = APIRouter()
system_router = APIRouter()


def get_matcher(request: Request) -> IntentMatcher:
    """Matcher built at startup and stored on app.state."""
    return request.app.state.matcher


def get_history_service(request: Request) -> HistoryService:
    return request.app.state.history_service


@system_router.get("/", response_model=dict)
async def root():
    """
    Root endpoint - API information.
    """
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "description": settings.api_description,
        "endpoints": {
            "message": f"{settings.api_prefix}/message",
            "clear": f"{settings.api_prefix}/clear",
            "status": f"{settings.api_prefix}/status",
            "suggestions": f"{settings.api_prefix}/suggestions",
            "health": "/health",
            "docs": "/docs"
        }
    }


@system_router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """
    Health check endpoint to verify service status.
    """
    return HealthCheckResponse(
        status="healthy",
        version=settings.api_version
    )


@router.post(
    "/message",
    response_model=dict,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Message is missing or blank"},
        500: {"model": ErrorResponse, "description": "Failed to get chatbot response"}
    }
)
async def send_message(
    request: ChatMessageRequest,
    matcher: IntentMatcher = Depends(get_matcher),
    history_service: HistoryService = Depends(get_history_service)
):
    """
    Answer a chat message.

    The reply comes from the first resolver that clears its threshold:
    intents, then FAQ entries, then the fallback text. When a session id is
    supplied, the exchange is added to that session's history.

    Args:
        request: ChatMessageRequest with message and optional sessionId

    Returns:
        {"success": true, "data": {"response": ..., "sessionId": ...}}

    Raises:
        InvalidInputError: If the message is missing or blank
    """
    if not request.message or not request.message.strip():
        raise InvalidInputError("Message is required")

    start_time = time.time()
    logger.info(f"[API] Message received (session={request.session_id}): {request.message[:100]}")

    result = matcher.match(request.message)

    if request.session_id:
        history_service.append_exchange(request.session_id, request.message, result.response)

    processing_time_ms = (time.time() - start_time) * 1000
    logger.info(f"[API] Replied from {result.source.value} in {processing_time_ms:.1f}ms")

    return format_chat_reply(result, request.session_id)


@router.post("/clear", response_model=dict)
async def clear_history(
    request: ClearHistoryRequest,
    history_service: HistoryService = Depends(get_history_service)
):
    """
    Clear a session's conversation history. Unknown or missing ids are ignored.
    """
    history_service.clear(request.session_id)
    return success_response(message="Chat history cleared")


@router.get("/status", response_model=dict)
async def chatbot_status(matcher: IntentMatcher = Depends(get_matcher)):
    """
    Report whether the chatbot has a usable corpus.
    """
    configured = not matcher.corpus.is_empty
    data = StatusData(
        configured=configured,
        provider=RULE_BASED_PROVIDER,
        available=configured
    )
    return success_response(data=data.model_dump())


@router.get("/suggestions", response_model=dict)
async def suggestions(matcher: IntentMatcher = Depends(get_matcher)):
    """
    Example questions for the chat widget.
    """
    data = SuggestionsData(suggestions=matcher.get_suggestions())
    return success_response(data=data.model_dump())
