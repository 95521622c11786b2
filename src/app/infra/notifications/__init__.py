"""Senders concretos dos canais de notificação."""

from __future__ import annotations

from .chat_webhooks import DingTalkSender, FeishuSender, WeComSender
from .email_sender import EmailSender
from .http_base import HttpClient, HttpClientConfig, HttpError
from .registry import create_channel_senders
from .webhook import GenericWebhookSender

__all__ = [
    "DingTalkSender",
    "EmailSender",
    "FeishuSender",
    "GenericWebhookSender",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "WeComSender",
    "create_channel_senders",
]
