"""Testes da conversão de ChannelConfig a partir de dados persistidos."""

from __future__ import annotations

import logging

import pytest

from app.protocols.models import ChannelConfig, load_channel_configs
from utils.errors import ChannelConfigError


def test_from_dict_defaults_and_legacy_config_key() -> None:
    assert ChannelConfig.from_dict({"type": "email"}) == ChannelConfig(type="email")
    channel = ChannelConfig.from_dict(
        {"type": "wecom", "enabled": True, "config": {"webhook": "https://w"}}
    )
    assert channel.settings == {"webhook": "https://w"}


@pytest.mark.parametrize(
    "data",
    [
        {"type": "wecom", "enabled": "false"},
        {"type": "wecom", "enabled": 1},
        {"type": "email", "enabled": True, "settings": ["smtp.local"]},
        {"enabled": True},
        {"type": 3, "enabled": True},
    ],
)
def test_from_dict_rejects_malformed_entries(data: dict) -> None:
    with pytest.raises(ChannelConfigError):
        ChannelConfig.from_dict(data)


def test_load_channel_configs_skips_bad_items(caplog: pytest.LogCaptureFixture) -> None:
    items = [
        {"type": "dingtalk", "enabled": "false"},
        None,
        {"type": "dingtalk", "enabled": False},
    ]

    with caplog.at_level(logging.WARNING):
        channels = load_channel_configs(items, source="NOTIFICATION_CHANNELS")

    assert channels == [ChannelConfig(type="dingtalk", enabled=False)]
    assert caplog.text.count("channel_config_skipped") == 2
