"""
Tests for the fetch/submit use cases against in-process stores.
"""

from __future__ import annotations

import asyncio

from message_board.application.use_cases.fetch_latest_message import FetchLatestMessageUseCase
from message_board.application.use_cases.submit_message import SubmitMessageUseCase
from message_board.domain.entities.error_code import ErrorCode
from message_board.domain.entities.result import Err, Ok
from tests.fakes import CountingStore, FailingStore


def test_fetch_latest_on_empty_store():
    """Fetching from an empty store succeeds with no content."""
    assert asyncio.run(FetchLatestMessageUseCase(CountingStore()).execute()) == Ok(None)


def test_submit_then_fetch_returns_trimmed_text():
    """A submitted message is stored trimmed and becomes the latest."""
    store = CountingStore()
    result = asyncio.run(SubmitMessageUseCase(store).execute("  hi there  "))

    assert isinstance(result, Ok)
    assert result.value.content == "hi there"
    assert asyncio.run(FetchLatestMessageUseCase(store).execute()) == Ok("hi there")


def test_invalid_submission_never_reaches_store():
    """Rejected submissions do not call the store."""
    store = CountingStore()
    uc = SubmitMessageUseCase(store)
    for value in (None, 5, "", "   ", "x" * 5001):
        assert isinstance(asyncio.run(uc.execute(value)), Err)
    assert store.insert_calls == 0
    assert store.all() == []


def test_store_failure_maps_to_opaque_codes():
    """Store exceptions become failed_fetch or failed_insert."""
    store = FailingStore()
    assert asyncio.run(FetchLatestMessageUseCase(store).execute()) == Err(ErrorCode.FAILED_FETCH)
    assert asyncio.run(SubmitMessageUseCase(store).execute("hello")) == Err(ErrorCode.FAILED_INSERT)


def test_max_length_is_configurable():
    """The submit cap follows the configured maximum length."""
    uc = SubmitMessageUseCase(CountingStore(), max_length=10)
    assert asyncio.run(uc.execute("x" * 11)) == Err(ErrorCode.MESSAGE_TOO_LONG)
