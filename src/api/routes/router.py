"""Agregador de rotas: health, controle serial e canais.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.notifications.router import router as notifications_router
from api.routes.serial.router import router as serial_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(serial_router, prefix="/api/serial", tags=["serial"])
    api_router.include_router(
        notifications_router,
        prefix="/api/notifications",
        tags=["notifications"],
    )

    return api_router
