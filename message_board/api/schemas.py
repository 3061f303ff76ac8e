from datetime import datetime

from pydantic import BaseModel

from message_board.domain.entities.error_code import ErrorCode


class InsertedMessageSchema(BaseModel):
    id: str
    content: str
    inserted_at: datetime


class LatestMessageResponseSchema(BaseModel):
    message: str | None


class SubmitMessageResponseSchema(BaseModel):
    ok: bool = True
    inserted: InsertedMessageSchema


class ErrorResponseSchema(BaseModel):
    error: ErrorCode
    detail: str | None = None
