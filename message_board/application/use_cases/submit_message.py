from __future__ import annotations

import logging
from typing import Any

from message_board.application.exceptions import StoreError
from message_board.application.ports.message_store import MessageStorePort
from message_board.application.utils.message_rules import DEFAULT_MAX_LENGTH, validate_message
from message_board.domain.entities.error_code import ErrorCode
from message_board.domain.entities.message import Message
from message_board.domain.entities.result import Err, Ok, Result


class SubmitMessageUseCase:
    def __init__(self, store: MessageStorePort, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        self._store = store
        self._max_length = max_length
        self._logger = logging.getLogger(__name__)

    async def execute(self, value: Any) -> Result[Message]:
        validated = validate_message(value, max_length=self._max_length)
        if isinstance(validated, Err):
            self._logger.info("Rejected message", extra={"error": validated.code.value})
            return validated

        try:
            inserted = await self._store.insert(validated.value)
        except StoreError as e:
            self._logger.exception("Failed to insert message", extra={"error": str(e)})
            return Err(ErrorCode.FAILED_INSERT)

        self._logger.info(
            "Message stored", extra={"message_id": inserted.id, "length": len(inserted.content)}
        )
        return Ok(inserted)
