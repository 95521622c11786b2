"""Tabela de senders por tipo de canal.

Adicionar um canal novo é registrar um sender aqui; o fan-out não muda.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from .chat_webhooks import DingTalkSender, FeishuSender, WeComSender
from .email_sender import EmailSender
from .http_base import HttpClient, HttpClientConfig
from .webhook import GenericWebhookSender

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.channel_sender import ChannelSenderProtocol


def create_channel_senders(
    http_client: HttpClient | None = None,
    email_sender: EmailSender | None = None,
    timeout_seconds: float = 10.0,
) -> Mapping[str, ChannelSenderProtocol]:
    """Cria a tabela imutável channel_type -> sender."""
    http = http_client or HttpClient(HttpClientConfig(timeout_seconds=timeout_seconds))
    senders: list[ChannelSenderProtocol] = [
        DingTalkSender(http),
        WeComSender(http),
        FeishuSender(http),
        GenericWebhookSender(http),
        email_sender or EmailSender(),
    ]
    return MappingProxyType({sender.channel_type: sender for sender in senders})
