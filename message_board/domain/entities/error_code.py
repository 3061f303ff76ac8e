from enum import Enum


class ErrorCode(str, Enum):
    INVALID_MESSAGE = "invalid_message"
    EMPTY_MESSAGE = "empty_message"
    MESSAGE_TOO_LONG = "message_too_long"
    FAILED_FETCH = "failed_fetch"
    FAILED_INSERT = "failed_insert"
    RATE_LIMITED = "rate_limited"
    PAYLOAD_TOO_LARGE = "payload_too_large"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorCode.INVALID_MESSAGE: 400,
    ErrorCode.EMPTY_MESSAGE: 400,
    ErrorCode.MESSAGE_TOO_LONG: 400,
    ErrorCode.FAILED_FETCH: 500,
    ErrorCode.FAILED_INSERT: 500,
    ErrorCode.RATE_LIMITED: 429,
    ErrorCode.PAYLOAD_TOO_LARGE: 413,
}
