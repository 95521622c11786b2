"""Roteamento de frames decodificados para handlers por tipo.

A tabela tipo -> handler é montada uma vez no startup e não muda depois.
Handlers rodam de forma síncrona no loop de decodificação e delegam I/O
lento para tasks destacadas. `route` nunca levanta exceção.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType
from typing import TYPE_CHECKING

from app.observability import correlation_scope, record_message_routed

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, Iterable, Mapping

    from app.protocols.models import DecodedMessage

logger = logging.getLogger(__name__)

MessageHandler = Callable[["DecodedMessage"], None]


class MessageRouter:
    """Despacha DecodedMessage pelo campo `type` (match exato)."""

    def __init__(self, handlers: Mapping[str, MessageHandler]) -> None:
        self._handlers: Mapping[str, MessageHandler] = MappingProxyType(dict(handlers))

    @classmethod
    def from_registrations(
        cls,
        registrations: Iterable[tuple[str, MessageHandler]],
    ) -> MessageRouter:
        """Cria o router a partir de pares (tag, handler).

        Raises:
            ValueError: tag vazia ou registrada mais de uma vez.
        """
        table: dict[str, MessageHandler] = {}
        for tag, handler in registrations:
            if not tag:
                msg = "Tag de mensagem vazia"
                raise ValueError(msg)
            if tag in table:
                msg = f"Tag de mensagem duplicada: {tag}"
                raise ValueError(msg)
            table[tag] = handler
        return cls(table)

    @property
    def message_types(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def route(self, message: DecodedMessage) -> None:
        """Invoca o handler do tipo; tipos desconhecidos são só logados."""
        with correlation_scope():
            handler = self._handlers.get(message.type)
            if handler is None:
                logger.debug(
                    "serial_message_unknown_type",
                    extra={"message_type": message.type, "raw": message.raw},
                )
                record_message_routed(message.type, handled=False)
                return

            record_message_routed(message.type, handled=True)
            try:
                handler(message)
            except Exception:
                logger.exception(
                    "serial_handler_failed",
                    extra={"message_type": message.type},
                )

    async def consume(self, messages: AsyncIterable[DecodedMessage]) -> int:
        """Roteia um stream de frames em sequência.

        Returns:
            Quantidade de frames consumidos até o fim do stream.
        """
        count = 0
        async for message in messages:
            self.route(message)
            count += 1
        return count
