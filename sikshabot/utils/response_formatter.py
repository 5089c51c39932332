"""
Response formatting utilities for the chatbot API envelopes.
Every endpoint answers with {"success": bool, ...} like the web client expects.
"""
from typing import Any, Dict, Optional
from sikshabot.models.schemas import MatchResult


def success_response(data: Optional[Dict[str, Any]] = None, message: Optional[str] = None) -> Dict[str, Any]:
    """Build a success envelope with `data` and/or `message`."""
    body: Dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    return body


def error_response(message: str, error: Optional[str] = None) -> Dict[str, Any]:
    """Build an error envelope; `error` carries detail only when provided."""
    body: Dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return body


def format_chat_reply(result: MatchResult, session_id: Optional[str]) -> Dict[str, Any]:
    """
    Transform a MatchResult into the message endpoint payload.

    Args:
        result: Matcher outcome
        session_id: Session id echoed back to the client

    Returns:
        {"success": True, "data": {"response": ..., "sessionId": ...}}
    """
    return success_response(data={
        "response": result.response,
        "sessionId": session_id
    })
