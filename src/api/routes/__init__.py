"""Rotas HTTP da API: plano de controle do bridge.

Estrutura:
- routes/health/: health checks e readiness
- routes/serial/: comandos ao módulo (SMS, modo avião, reboot, status)
- routes/notifications/: configuração dos canais de notificação

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
