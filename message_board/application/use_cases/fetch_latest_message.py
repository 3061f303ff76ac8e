from __future__ import annotations

import logging

from message_board.application.exceptions import StoreError
from message_board.application.ports.message_store import MessageStorePort
from message_board.domain.entities.error_code import ErrorCode
from message_board.domain.entities.result import Err, Ok, Result


class FetchLatestMessageUseCase:
    def __init__(self, store: MessageStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    async def execute(self) -> Result[str | None]:
        try:
            message = await self._store.latest()
        except StoreError as e:
            self._logger.exception("Failed to fetch latest message", extra={"error": str(e)})
            return Err(ErrorCode.FAILED_FETCH)

        return Ok(message.content if message else None)
