"""Protocolo do link serial (somente escrita de comandos).

A leitura/decodificação de frames fica na camada serial; este core só
recebe DecodedMessage já prontos.
"""

from __future__ import annotations

from typing import Any, Protocol


class SerialLinkProtocol(Protocol):
    """Escreve um comando de controle no módulo celular.

    Implementações levantam `utils.errors.SerialLinkError` em falha.
    """

    async def send_command(self, command: dict[str, Any]) -> None: ...

    def is_connected(self) -> bool: ...
