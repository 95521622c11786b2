"""Protocolo de leitura/escrita de configurações de canal."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import ChannelConfig


class ChannelConfigStoreProtocol(ABC):
    """Fonte das configurações de canal.

    Lida a cada fan-out, sem cache: habilitar/desabilitar um canal vale
    para a próxima notificação.
    """

    @abstractmethod
    async def list_channels(self) -> list[ChannelConfig]:
        """Retorna todas as configurações (habilitadas ou não)."""

    @abstractmethod
    async def replace_channels(self, channels: Sequence[ChannelConfig]) -> None:
        """Substitui o conjunto completo de configurações."""
