"""Cache do último estado conhecido do módulo celular.

Atualizado pelos handlers de sistema (no loop de decodificação) e lido
pelo plano de controle.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any


class DeviceStatusCache:
    """Estado em memória do módulo (status, SIM, número, heartbeat)."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self.ready = False
        self.firmware: dict[str, Any] = {}
        self.status: dict[str, Any] = {}
        self.phone_number = ""
        self.sim_state = ""
        self.last_heartbeat: float | None = None
        self.updated_at: float | None = None

    def _touch(self) -> None:
        self.updated_at = self._clock()

    def mark_ready(self, firmware: dict[str, Any]) -> None:
        self.ready = True
        self.firmware = dict(firmware)
        self._touch()

    def record_heartbeat(self) -> None:
        self.last_heartbeat = self._clock()

    def update_status(self, status: dict[str, Any]) -> None:
        self.status = dict(status)
        self._touch()

    def set_phone_number(self, phone_number: str) -> None:
        self.phone_number = phone_number
        self._touch()

    def set_sim_state(self, sim_state: str) -> None:
        self.sim_state = sim_state
        self._touch()

    def snapshot(self) -> dict[str, Any]:
        """Status do módulo mesclado com os campos mantidos pelo cache."""
        return {
            **self.status,
            "ready": self.ready,
            "firmware": dict(self.firmware),
            "phone_number": self.phone_number,
            "sim_state": self.sim_state,
            "last_heartbeat": self.last_heartbeat,
            "updated_at": self.updated_at,
        }
