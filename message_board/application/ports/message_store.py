from abc import ABC, abstractmethod

from message_board.domain.entities.message import Message


class MessageStorePort(ABC):
    @abstractmethod
    async def latest(self) -> Message | None:
        """Return the message with the most recent inserted_at, or None when the store is empty."""
        raise NotImplementedError

    @abstractmethod
    async def insert(self, content: str) -> Message:
        """Persist content as a new message. The store assigns id and inserted_at."""
        raise NotImplementedError

    async def close(self) -> None:
        return None
