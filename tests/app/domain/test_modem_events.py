"""Testes dos modelos de payload do módulo."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.domain.modem_events import (
    CommandResponse,
    IncomingCall,
    IncomingSms,
    ModuleAlert,
    PhoneNumberResponse,
    SmsSendResult,
    decode_payload,
)
from app.protocols.models import DecodedMessage


def test_incoming_sms_reads_from_alias_and_ignores_extras() -> None:
    sms = decode_payload(
        IncomingSms,
        {"timestamp": 1700000000, "from": "+86138", "content": "oi", "pdu": "07A1"},
    )
    assert sms.sender == "+86138"
    assert sms.timestamp == 1700000000


def test_incoming_sms_requires_sender() -> None:
    with pytest.raises(ValidationError):
        decode_payload(IncomingSms, {"timestamp": 1, "content": "sem remetente"})


def test_incoming_sms_missing_or_null_fields_become_empty() -> None:
    sms = decode_payload(IncomingSms, {"from": "+86138", "content": None})
    assert (sms.timestamp, sms.content) == (0, "")
    call = decode_payload(IncomingCall, {"from": "+86137", "timestamp": None})
    assert call.timestamp == 0


@pytest.mark.parametrize(
    ("model", "payload"),
    [
        (SmsSendResult, {"success": "yes", "to": "+1555", "request_id": "R1"}),
        (SmsSendResult, {"success": 1, "request_id": "R1"}),
        (IncomingSms, {"timestamp": "1700000000", "from": "+86138", "content": "x"}),
        (IncomingSms, {"timestamp": 1, "from": 86138, "content": "x"}),
        (IncomingCall, {"timestamp": True, "from": "+86137"}),
        (CommandResponse, {"action": "reboot", "success": "false"}),
    ],
)
def test_wrong_types_are_not_coerced(model: type, payload: dict) -> None:
    with pytest.raises(ValidationError):
        decode_payload(model, payload)


def test_send_result_defaults_and_none_values() -> None:
    result = decode_payload(SmsSendResult, {"success": True, "to": None, "request_id": None})
    assert result.to == ""
    assert result.request_id == ""
    assert decode_payload(SmsSendResult, {}).success is False


def test_phone_number_accepts_both_keys() -> None:
    assert decode_payload(PhoneNumberResponse, {"number": "+1"}).phone_number == "+1"
    assert decode_payload(PhoneNumberResponse, {"phone_number": "+2"}).phone_number == "+2"


def test_alert_code_is_text() -> None:
    assert decode_payload(ModuleAlert, {"message": "x", "code": 12}).code == "12"


def test_decoded_message_payload_is_read_only() -> None:
    source = {"timestamp": 1}
    message = DecodedMessage(type="heartbeat", payload=source, raw="HB")
    source["timestamp"] = 2

    assert message.payload["timestamp"] == 1
    with pytest.raises(TypeError):
        message.payload["timestamp"] = 3  # type: ignore[index]
