"""Exceções compartilhadas de infraestrutura e de canais."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""


class StoreUnavailableError(InfrastructureError):
    """Store de mensagens ou de canais indisponível."""


class SerialLinkError(InfrastructureError):
    """Falha ao escrever comando no link serial (ou link ausente)."""


class ChannelConfigError(ValueError):
    """Configuração de canal inválida ou incompleta."""


class ChannelSendError(RuntimeError):
    """Falha ao entregar notificação em um canal.

    Args:
        channel_type: Tipo do canal (dingtalk, wecom, feishu, webhook, email)
        message: Descrição curta, sem PII
    """

    def __init__(self, channel_type: str, message: str) -> None:
        super().__init__(message)
        self.channel_type = channel_type
