"""Callback opcional de status para o agendador de tarefas externo."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from .models import TaskStatus

TaskStatusUpdater = Callable[[str, TaskStatus], Awaitable[None]]
"""Recebe (request_id, task_status). Exceções são logadas pelo correlator."""
