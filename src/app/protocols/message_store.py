"""Protocolo do store de registros de SMS.

Registros são endereçados individualmente por id; não há transação
entre mensagens distintas.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import MessageStatus, TextMessageRecord


class TextMessageStoreProtocol(ABC):
    """Contrato assíncrono para persistência de TextMessageRecord."""

    @abstractmethod
    async def save(self, record: TextMessageRecord) -> None:
        """Persiste (ou sobrescreve) o registro pelo id."""

    @abstractmethod
    async def update_status(self, record_id: str, status: MessageStatus) -> bool:
        """Atualiza o status do registro.

        Returns:
            True se o registro existia; False caso contrário.
        """

    @abstractmethod
    async def get(self, record_id: str) -> TextMessageRecord | None:
        """Retorna o registro ou None."""

    @abstractmethod
    async def list_recent(self, limit: int = 50) -> list[TextMessageRecord]:
        """Lista registros mais recentes primeiro."""
