"""Comandos de controle enviados ao módulo celular.

`send_sms` gera o request_id, grava o registro de saída (pending) com
esse mesmo id e só então escreve o comando no link serial. O resultado
chega depois como `sms_send_result` e é aplicado pelo correlator.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from app.protocols.models import TextMessageRecord
from utils.errors import SerialLinkError

if TYPE_CHECKING:
    from app.coordinators.serial.device_status import DeviceStatusCache
    from app.protocols.message_store import TextMessageStoreProtocol
    from app.protocols.serial_link import SerialLinkProtocol
    from app.runtime.background_tasks import BackgroundTaskRunner

logger = logging.getLogger(__name__)


class ModemControlService:
    """Plano de controle: SMS de saída, modo avião, reboot e status.

    Args:
        link: Link serial; None deixa o serviço sem conexão (comandos falham)
        message_store: Store dos registros de SMS
        status_cache: Cache do estado do módulo
        tasks: Executor das tasks destacadas (refresh de status)
    """

    def __init__(
        self,
        *,
        link: SerialLinkProtocol | None,
        message_store: TextMessageStoreProtocol,
        status_cache: DeviceStatusCache,
        tasks: BackgroundTaskRunner,
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ) -> None:
        self._link = link
        self._store = message_store
        self._cache = status_cache
        self._tasks = tasks
        self._clock = clock
        self._id_factory = id_factory

    @property
    def is_connected(self) -> bool:
        return self._link is not None and self._link.is_connected()

    def attach_link(self, link: SerialLinkProtocol | None) -> None:
        self._link = link

    async def _send_command(self, command: dict[str, Any]) -> None:
        if self._link is None:
            msg = "Link serial não configurado"
            raise SerialLinkError(msg)
        await self._link.send_command(command)
        logger.info("serial_command_sent", extra={"command_type": command.get("type")})

    async def send_sms(self, to: str, content: str) -> str:
        """Envia SMS e retorna o request_id usado na correlação.

        Raises:
            ValueError: destino ou conteúdo vazio.
            SerialLinkError: falha ao escrever o comando (registro vira failed).
        """
        if not to or not content:
            msg = "Destino e conteúdo são obrigatórios"
            raise ValueError(msg)

        request_id = self._id_factory()
        record = TextMessageRecord(
            id=request_id,
            sender="",
            recipient=to,
            content=content,
            direction="outgoing",
            status="pending",
            created_at=int(self._clock() * 1000),
        )
        try:
            await self._store.save(record)
        except Exception as exc:
            logger.error(
                "outgoing_sms_save_failed",
                extra={
                    "request_id": request_id,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )

        try:
            await self._send_command(
                {"type": "send_sms", "to": to, "content": content, "request_id": request_id}
            )
        except SerialLinkError:
            await self._mark_failed(request_id)
            raise
        return request_id

    async def _mark_failed(self, request_id: str) -> None:
        try:
            await self._store.update_status(request_id, "failed")
        except Exception as exc:
            logger.error(
                "outgoing_sms_mark_failed_error",
                extra={"request_id": request_id, "error_type": type(exc).__name__},
            )

    async def set_flymode(self, enabled: bool) -> None:
        await self._send_command({"type": "set_flymode", "enabled": enabled})

    async def reboot(self) -> None:
        await self._send_command({"type": "reboot"})

    async def request_status(self) -> None:
        await self._send_command({"type": "get_status"})

    def request_status_refresh(self) -> None:
        """Agenda `get_status` destacado (ex: após modo avião ou reboot)."""
        self._tasks.schedule("request_status:refresh", self.request_status())

    def get_status(self) -> dict[str, Any]:
        return {"connected": self.is_connected, **self._cache.snapshot()}
