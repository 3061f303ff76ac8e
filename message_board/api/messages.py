from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import parse_qs

from fastapi import APIRouter, Depends, Request, Response

from message_board.api.errors import error_response
from message_board.api.schemas import (
    ErrorResponseSchema,
    InsertedMessageSchema,
    LatestMessageResponseSchema,
    SubmitMessageResponseSchema,
)
from message_board.application.use_cases.fetch_latest_message import FetchLatestMessageUseCase
from message_board.application.use_cases.submit_message import SubmitMessageUseCase
from message_board.domain.entities.result import Err
from message_board.wiring.dependencies import (
    get_fetch_latest_message_use_case,
    get_submit_message_use_case,
)

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.get(
    "/message",
    response_model=LatestMessageResponseSchema,
    responses={500: {"model": ErrorResponseSchema}},
)
async def get_latest_message(
    uc: FetchLatestMessageUseCase = Depends(get_fetch_latest_message_use_case),
) -> LatestMessageResponseSchema | Response:
    result = await uc.execute()
    if isinstance(result, Err):
        return error_response(result.code)
    return LatestMessageResponseSchema(message=result.value)


@router.post(
    "/message",
    response_model=SubmitMessageResponseSchema,
    responses={400: {"model": ErrorResponseSchema}, 500: {"model": ErrorResponseSchema}},
)
async def submit_message(
    request: Request,
    uc: SubmitMessageUseCase = Depends(get_submit_message_use_case),
) -> SubmitMessageResponseSchema | Response:
    value = await read_submitted_message(request)
    result = await uc.execute(value)
    if isinstance(result, Err):
        return error_response(result.code)

    inserted = result.value
    return SubmitMessageResponseSchema(
        ok=True,
        inserted=InsertedMessageSchema(
            id=inserted.id,
            content=inserted.content,
            inserted_at=inserted.inserted_at,
        ),
    )


async def read_submitted_message(request: Request) -> Any:
    """Extract the raw `message` field from a JSON or form-encoded body. Returns None when absent or unparseable."""
    body = await request.body()
    if not body:
        return None

    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/x-www-form-urlencoded"):
        values = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True).get("message")
        return values[0] if values else None

    if not content_type.startswith("application/json"):
        return None

    try:
        payload = json.loads(body)
    except ValueError:
        logger.info("Unparseable message body", extra={"path": request.url.path})
        return None

    if isinstance(payload, dict):
        return payload.get("message")
    return None
