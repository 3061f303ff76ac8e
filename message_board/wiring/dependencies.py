from __future__ import annotations

from fastapi import Depends, Request

from message_board.application.ports.message_store import MessageStorePort
from message_board.application.ports.rate_limiter import RateLimiterPort
from message_board.application.use_cases.fetch_latest_message import FetchLatestMessageUseCase
from message_board.application.use_cases.submit_message import SubmitMessageUseCase
from message_board.core.config import Settings
from message_board.infrastructure.rate_limit.memory_limiter import SlidingWindowRateLimiter
from message_board.infrastructure.store.supabase_store import SupabaseMessageStore


def build_message_store(settings: Settings) -> MessageStorePort:
    return SupabaseMessageStore(
        base_url=settings.SUPABASE_URL,
        service_key=settings.SUPABASE_SERVICE_ROLE,
        table=settings.SUPABASE_TABLE,
        timeout=settings.STORE_TIMEOUT_SECONDS,
    )


def build_rate_limiter(settings: Settings) -> RateLimiterPort:
    return SlidingWindowRateLimiter(
        max_requests=settings.RATE_LIMIT_MAX,
        window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
    )


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_message_store(request: Request) -> MessageStorePort:
    return request.app.state.message_store


def get_fetch_latest_message_use_case(
    store: MessageStorePort = Depends(get_message_store),
) -> FetchLatestMessageUseCase:
    return FetchLatestMessageUseCase(store=store)


def get_submit_message_use_case(
    store: MessageStorePort = Depends(get_message_store),
    settings: Settings = Depends(get_app_settings),
) -> SubmitMessageUseCase:
    return SubmitMessageUseCase(store=store, max_length=settings.MESSAGE_MAX_LENGTH)
