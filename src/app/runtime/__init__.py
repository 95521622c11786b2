"""Execução de trabalho destacado (tasks em background)."""

from app.runtime.background_tasks import BackgroundTaskRunner

__all__ = ["BackgroundTaskRunner"]
