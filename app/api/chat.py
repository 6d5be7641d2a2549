"""API routes for the Linkwave chat widget."""
from __future__ import annotations

import json
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.rate_limit import enforce_chat_rate_limit
from app.services.chat import (
    ChatService,
    ProviderError,
    ValidationError,
    get_chat_service,
    validate_chat_request,
)

logger = logging.getLogger(__name__)

router = APIRouter()

GENERIC_ERROR = "Internal server error"
GENERIC_MESSAGE = "An error occurred. Please try again later."


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------
class ChatResponse(BaseModel):
    response: str
    consultationIntent: bool


class ValidationErrorResponse(BaseModel):
    error: str
    details: Optional[List[str]] = None


class ServerErrorResponse(BaseModel):
    error: str
    message: str


def _server_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR, "message": GENERIC_MESSAGE},
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": ServerErrorResponse}},
    dependencies=[Depends(enforce_chat_rate_limit)],
)
async def chat(request: Request, service: ChatService = Depends(get_chat_service)):
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request", "details": ["Request body must be valid JSON"]},
        )

    try:
        validated = validate_chat_request(payload)
    except ValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request", "details": e.details},
        )

    try:
        reply = await service.reply(validated.message, validated.history)
    except ProviderError as e:
        logger.error(f"Chat provider error (status {e.status_code}): {e}", exc_info=True)
        return _server_error()
    except Exception as e:
        logger.error(f"Chat API error: {e}", exc_info=True)
        return _server_error()

    return ChatResponse(**reply.to_payload())
