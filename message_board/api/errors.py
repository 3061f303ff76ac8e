from __future__ import annotations

from typing import Mapping

from fastapi.responses import JSONResponse

from message_board.api.schemas import ErrorResponseSchema
from message_board.domain.entities.error_code import ErrorCode


def error_response(
    code: ErrorCode,
    detail: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponseSchema(error=code, detail=detail)
    return JSONResponse(
        status_code=code.status_code,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=dict(headers) if headers else None,
    )
