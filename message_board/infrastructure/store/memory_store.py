from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Callable

from message_board.application.ports.message_store import MessageStorePort
from message_board.domain.entities.message import Message


class MemoryMessageStore(MessageStorePort):
    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._messages: list[Message] = []
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def latest(self) -> Message | None:
        if not self._messages:
            return None
        # max() keeps the first of equal keys, so walk newest-first to prefer later inserts on ties
        return max(reversed(self._messages), key=lambda m: m.inserted_at)

    async def insert(self, content: str) -> Message:
        message = Message(id=str(uuid.uuid4()), content=content, inserted_at=self._clock())
        self._messages.append(message)
        return message

    def all(self) -> list[Message]:
        return list(self._messages)
