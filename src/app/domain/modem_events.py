"""Views tipadas dos payloads enviados pelo módulo celular.

Cada tipo de frame tem seu modelo; o handler decodifica o payload na
fronteira com `decode_payload` e trata `ValidationError` como ramo
explícito (frame descartado). Os modelos são strict: `"yes"` não vira
bool e `"1700000000"` não vira int. Campos ausentes ou null viram valor
vazio (0 ou ""), exceto o remetente de SMS e chamada.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

_EventT = TypeVar("_EventT", bound=BaseModel)


def _empty_if_none(value: Any, empty: Any) -> Any:
    return empty if value is None else value


class IncomingSms(BaseModel):
    """SMS recebido pelo módulo (`incoming_sms`)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, strict=True)

    timestamp: int = 0
    sender: str = Field(alias="from")
    content: str = ""

    @field_validator("timestamp", mode="before")
    @classmethod
    def _timestamp_none_as_zero(cls, value: Any) -> Any:
        return _empty_if_none(value, 0)

    @field_validator("content", mode="before")
    @classmethod
    def _content_none_as_empty(cls, value: Any) -> Any:
        return _empty_if_none(value, "")


class IncomingCall(BaseModel):
    """Chamada recebida (`incoming_call`)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, strict=True)

    timestamp: int = 0
    sender: str = Field(alias="from")

    @field_validator("timestamp", mode="before")
    @classmethod
    def _timestamp_none_as_zero(cls, value: Any) -> Any:
        return _empty_if_none(value, 0)


class CallDisconnected(BaseModel):
    """Fim de chamada (`call_disconnected`)."""

    model_config = ConfigDict(extra="ignore", strict=True)

    timestamp: int = 0

    @field_validator("timestamp", mode="before")
    @classmethod
    def _timestamp_none_as_zero(cls, value: Any) -> Any:
        return _empty_if_none(value, 0)


class SmsSendResult(BaseModel):
    """Resultado assíncrono de um `send_sms` (`sms_send_result`).

    Campos ausentes viram valores vazios; request_id vazio é tratado pelo
    correlator como "sem registro para atualizar". `success` precisa ser
    bool de fato.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    success: bool = False
    to: str = ""
    request_id: str = ""

    @field_validator("to", "request_id", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return _empty_if_none(value, "")


class SystemReady(BaseModel):
    """Módulo reiniciado e pronto (`system_ready`)."""

    model_config = ConfigDict(extra="allow", strict=True)

    version: str = ""


class CommandResponse(BaseModel):
    """Resposta a comando (`cmd_response`, `cellular_control_response`)."""

    model_config = ConfigDict(extra="allow", strict=True)

    action: str = ""
    success: bool = True
    message: str = ""


class PhoneNumberResponse(BaseModel):
    """Número do SIM (`phone_number_response`)."""

    model_config = ConfigDict(extra="ignore", strict=True)

    phone_number: str = Field(default="", validation_alias=AliasChoices("phone_number", "number"))

    @field_validator("phone_number", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return _empty_if_none(value, "")


class SimEvent(BaseModel):
    """Mudança de estado do SIM (`sim_event`)."""

    model_config = ConfigDict(extra="allow", strict=True)

    event: str = ""
    state: str = ""


class ModuleAlert(BaseModel):
    """Alerta emitido pelo módulo (`warning`, `error`)."""

    model_config = ConfigDict(extra="allow", strict=True)

    message: str = ""
    code: str = ""

    @field_validator("code", mode="before")
    @classmethod
    def _code_as_text(cls, value: Any) -> Any:
        return "" if value is None else str(value)


def decode_payload(model: type[_EventT], payload: Mapping[str, Any]) -> _EventT:
    """Decodifica o payload de um frame no modelo informado.

    Raises:
        pydantic.ValidationError: payload malformado para o tipo.
    """
    return model.model_validate(dict(payload))
