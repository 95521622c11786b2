"""Tabela de registro tipo -> handler montada no startup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .router import MessageRouter

if TYPE_CHECKING:
    from .call_handlers import CallHandlers
    from .correlator import SendResultCorrelator
    from .router import MessageHandler
    from .sms_handlers import IncomingSmsHandler
    from .system_handlers import SystemHandlers

MESSAGE_TYPES = (
    "incoming_sms",
    "system_ready",
    "heartbeat",
    "status_response",
    "cellular_control_response",
    "phone_number_response",
    "cmd_response",
    "sms_send_result",
    "sim_event",
    "warning",
    "error",
    "incoming_call",
    "call_disconnected",
)


def build_registrations(
    *,
    incoming_sms: IncomingSmsHandler,
    correlator: SendResultCorrelator,
    calls: CallHandlers,
    system: SystemHandlers,
) -> list[tuple[str, MessageHandler]]:
    return [
        ("incoming_sms", incoming_sms),
        ("system_ready", system.handle_system_ready),
        ("heartbeat", system.handle_heartbeat),
        ("status_response", system.handle_status_response),
        ("cellular_control_response", system.handle_cellular_control_response),
        ("phone_number_response", system.handle_phone_number_response),
        ("cmd_response", system.handle_command_response),
        ("sms_send_result", correlator),
        ("sim_event", system.handle_sim_event),
        ("warning", system.handle_warning),
        ("error", system.handle_error),
        ("incoming_call", calls.handle_incoming_call),
        ("call_disconnected", calls.handle_call_disconnected),
    ]


def build_router(
    *,
    incoming_sms: IncomingSmsHandler,
    correlator: SendResultCorrelator,
    calls: CallHandlers,
    system: SystemHandlers,
) -> MessageRouter:
    """Cria o MessageRouter com os 13 tipos conhecidos."""
    return MessageRouter.from_registrations(
        build_registrations(
            incoming_sms=incoming_sms,
            correlator=correlator,
            calls=calls,
            system=system,
        )
    )
