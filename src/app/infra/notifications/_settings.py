"""Leitura tolerante dos settings opacos de cada canal."""

from __future__ import annotations

from typing import Any

from utils.errors import ChannelConfigError


def require_setting(channel_type: str, settings: dict[str, Any], *names: str) -> str:
    """Retorna o primeiro valor não vazio entre `names`.

    Raises:
        ChannelConfigError: nenhum dos campos configurado.
    """
    for name in names:
        value = settings.get(name)
        if value:
            return str(value)
    msg = f"{channel_type}: campo obrigatório ausente ({'/'.join(names)})"
    raise ChannelConfigError(msg)


def optional_setting(settings: dict[str, Any], name: str, default: str = "") -> str:
    value = settings.get(name)
    return str(value) if value else default
