"""POST JSON para webhooks de canais, sem retry.

Uma falha vira HttpError (mensagem sem URL nem corpo, que podem conter
tokens de webhook); quem loga é o fan-out, uma única vez.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True)
class HttpClientConfig:
    timeout_seconds: float = 10.0


class HttpError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente compartilhado pelos senders HTTP.

    Args:
        config: Timeout por requisição
        transport: Transport httpx opcional (MockTransport nos testes)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = (config or HttpClientConfig()).timeout_seconds
        self._transport = transport

    async def post(
        self,
        url: str,
        json: Any,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
            try:
                response = await client.post(url, json=json, headers=headers, params=params)
            except httpx.TimeoutException as exc:
                raise HttpError("http_timeout") from exc
            except httpx.HTTPError as exc:
                raise HttpError(f"http_connection_error: {type(exc).__name__}") from exc

        if response.is_error:
            raise HttpError("http_error_status", status_code=response.status_code)
        return response
