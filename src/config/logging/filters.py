"""Filter de contexto dos logs do bridge.

Campos injetados em todo record:
- service / environment: fixos, definidos no startup
- correlation_id: do frame serial ou da requisição HTTP em curso
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class ContextFilter(logging.Filter):
    """Enriquece records; nunca descarta nenhum.

    Um correlation_id passado explicitamente via `extra` tem precedência
    sobre o valor do getter.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        environment: str = "development",
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._environment = environment
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter is not None else ""
        record.service = self._service_name
        record.environment = self._environment
        return True
