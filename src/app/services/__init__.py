"""Serviços de aplicação.

Unidades reutilizáveis de orquestração.
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.modem_control import ModemControlService

__all__ = ["ModemControlService"]
