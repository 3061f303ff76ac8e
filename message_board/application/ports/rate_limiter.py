from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitState:
    limit: int
    remaining: int
    reset_after: float


class RateLimiterPort(ABC):
    @abstractmethod
    def allow(self, key: str) -> bool:
        """Count one request for key. Returns False when the quota for the current window is spent."""
        raise NotImplementedError

    @abstractmethod
    def state(self, key: str) -> RateLimitState:
        raise NotImplementedError
