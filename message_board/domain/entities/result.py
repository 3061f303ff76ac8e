from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from message_board.domain.entities.error_code import ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    code: ErrorCode


Result = Union[Ok[T], Err]
