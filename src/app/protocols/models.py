"""Modelos compartilhados entre router, handlers, stores e canais."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping  # noqa: TC003 - usado em runtime
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

from utils.errors import ChannelConfigError

logger = logging.getLogger(__name__)

MessageDirection = Literal["incoming", "outgoing"]
MessageStatus = Literal["received", "sent", "failed", "pending"]
NotificationKind = Literal["sms", "call", "system"]
TaskStatus = Literal["success", "failed"]
ChannelType = Literal["dingtalk", "wecom", "feishu", "webhook", "email"]

KNOWN_CHANNEL_TYPES: frozenset[str] = frozenset(
    {"dingtalk", "wecom", "feishu", "webhook", "email"}
)


@dataclass(frozen=True, slots=True)
class DecodedMessage:
    """Frame já decodificado pela camada serial.

    Attributes:
        type: Tag do tipo de mensagem (ex: "incoming_sms")
        payload: Mapa chave/valor sem tipagem forte (somente leitura)
        raw: Forma textual original do frame
    """

    type: str
    payload: Mapping[str, Any] = field(default_factory=dict)
    raw: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.payload, MappingProxyType):
            object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))


@dataclass(frozen=True, slots=True)
class TextMessageRecord:
    """Registro persistido de SMS (entrada ou saída).

    Para mensagens de saída, `id` é o request_id enviado ao módulo no
    comando `send_sms`; o resultado assíncrono é correlacionado por ele.
    """

    id: str
    sender: str
    recipient: str
    content: str
    direction: MessageDirection
    status: MessageStatus
    created_at: int  # epoch em milissegundos

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "from": self.sender,
            "to": self.recipient,
            "content": self.content,
            "direction": self.direction,
            "status": self.status,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TextMessageRecord:
        return cls(
            id=str(data["id"]),
            sender=str(data.get("from", "")),
            recipient=str(data.get("to", "")),
            content=str(data.get("content", "")),
            direction=data["direction"],
            status=data["status"],
            created_at=int(data.get("created_at", 0)),
        )


@dataclass(frozen=True, slots=True)
class NotificationMessage:
    """Notificação normalizada, independente de canal.

    Attributes:
        kind: sms | call | system
        sender: Origem exibida (número ou "system")
        content: Texto (vazio para chamadas)
        timestamp: Epoch em segundos
    """

    kind: NotificationKind
    sender: str
    content: str
    timestamp: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "from": self.sender,
            "content": self.content,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True, slots=True)
class ChannelConfig:
    """Configuração de um canal de notificação.

    `settings` é opaco para o fan-out; cada sender interpreta o seu.
    """

    type: str
    enabled: bool = False
    settings: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "enabled": self.enabled,
            "settings": dict(self.settings),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ChannelConfig:
        """Converte um item persistido/semeado.

        `enabled` precisa ser bool JSON de verdade (`"false"` não habilita
        o canal) e `settings` um objeto.

        Raises:
            ChannelConfigError: item malformado.
        """
        channel_type = data.get("type")
        if not isinstance(channel_type, str) or not channel_type:
            raise ChannelConfigError("canal sem campo type")
        enabled = data.get("enabled", False)
        if not isinstance(enabled, bool):
            raise ChannelConfigError(f"{channel_type}: enabled deve ser bool")
        settings = data.get("settings")
        if settings is None:
            settings = data.get("config")
        if settings is None:
            settings = {}
        if not isinstance(settings, Mapping):
            raise ChannelConfigError(f"{channel_type}: settings deve ser objeto")
        return cls(type=channel_type, enabled=enabled, settings=dict(settings))


def load_channel_configs(items: Iterable[Any], *, source: str) -> list[ChannelConfig]:
    """Converte a lista inteira, pulando (com warning) itens malformados."""
    channels: list[ChannelConfig] = []
    for index, item in enumerate(items):
        try:
            if not isinstance(item, Mapping):
                raise ChannelConfigError("item não é objeto")
            channels.append(ChannelConfig.from_dict(item))
        except ChannelConfigError as exc:
            logger.warning(
                "channel_config_skipped",
                extra={"source": source, "index": index, "error": str(exc)},
            )
    return channels
