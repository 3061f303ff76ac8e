from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from message_board.application.exceptions import StoreContractError, StoreUpstreamError
from message_board.application.ports.message_store import MessageStorePort
from message_board.domain.entities.message import Message

_TIMESTAMP = TypeAdapter(datetime)


class SupabaseMessageStore(MessageStorePort):
    """
    Message store backed by a Supabase table, reached through its PostgREST interface.

    Raises:
        StoreUpstreamError: network failures, timeouts, non-2xx responses
        StoreContractError: a response body that is not a list of message rows
    """

    def __init__(
        self,
        base_url: str,
        service_key: str,
        table: str = "messages",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not base_url or not service_key:
            raise ValueError("Supabase URL and service key are required")

        self._endpoint = f"{base_url.rstrip('/')}/rest/v1/{table}"
        self._headers = {
            "apikey": service_key,
            "Authorization": f"Bearer {service_key}",
        }
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    async def latest(self) -> Message | None:
        params = {
            "select": "id,content,inserted_at",
            "order": "inserted_at.desc",
            "limit": "1",
        }
        rows = await self._request("GET", params=params)
        return _to_message(rows[0]) if rows else None

    async def insert(self, content: str) -> Message:
        headers = {"Content-Type": "application/json", "Prefer": "return=representation"}
        rows = await self._request("POST", json=[{"content": content}], headers=headers)
        if not rows:
            raise StoreContractError("Insert returned no rows")
        return _to_message(rows[0])

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        try:
            response = await self._client.request(
                method,
                self._endpoint,
                params=params,
                json=json,
                headers={**self._headers, **(headers or {})},
            )
        except httpx.HTTPError as e:
            raise StoreUpstreamError(f"Supabase request failed: {e}") from e

        if response.status_code >= 400:
            self._logger.error(
                "Supabase request rejected",
                extra={"status": response.status_code, "error": response.text[:500]},
            )
            raise StoreUpstreamError(f"Supabase responded with status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise StoreContractError("Supabase returned a non-JSON body") from e

        if not isinstance(data, list):
            raise StoreContractError(f"Expected a list of rows, got {type(data).__name__}")
        return data


def _to_message(row: Any) -> Message:
    try:
        inserted_at = _TIMESTAMP.validate_python(row["inserted_at"])
        return Message(id=str(row["id"]), content=str(row["content"]), inserted_at=inserted_at)
    except (KeyError, TypeError, ValidationError) as e:
        raise StoreContractError(f"Malformed message row: {e}") from e
