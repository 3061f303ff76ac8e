from __future__ import annotations

from typing import Any

from message_board.domain.entities.error_code import ErrorCode
from message_board.domain.entities.result import Err, Ok, Result

DEFAULT_MAX_LENGTH = 5000

# whitespace and line terminators as ECMAScript String.prototype.trim defines them
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def validate_message(value: Any, max_length: int = DEFAULT_MAX_LENGTH) -> Result[str]:
    """
    Check a submitted message and return its trimmed text.

    Rules apply in order and the first failure wins:
    not a string, empty after trimming, longer than max_length after trimming.
    """
    if not isinstance(value, str):
        return Err(ErrorCode.INVALID_MESSAGE)

    trimmed = value.strip(JS_WHITESPACE)
    if not trimmed:
        return Err(ErrorCode.EMPTY_MESSAGE)

    if len(trimmed) > max_length:
        return Err(ErrorCode.MESSAGE_TOO_LONG)

    return Ok(trimmed)
