"""Entrypoint da aplicação Modem Bridge.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI) com o plano
de controle do módulo celular. A camada serial entrega frames ao core
via `app.state.bridge.handle_frame(...)`.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import get_modem_bridge, initialize_app, validate_runtime_settings
from app.bootstrap.clients import close_redis_clients
from config.logging import get_logger
from config.settings import get_task_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.bootstrap.dependencies import ModemBridge

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: valida settings e monta o core se não foi injetado.

    Shutdown: aguarda tasks destacadas (com timeout) e fecha Redis.
    """
    logger.info("app_starting")
    validate_runtime_settings()
    if getattr(app.state, "bridge", None) is None:
        app.state.bridge = get_modem_bridge()

    yield

    logger.info("app_shutting_down")
    bridge: ModemBridge = app.state.bridge
    await bridge.shutdown(timeout_seconds=get_task_settings().drain_timeout_seconds)
    await close_redis_clients()


def create_app(bridge: ModemBridge | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        bridge: Core já montado (ex: com link serial anexado). Se None,
            o lifespan monta o padrão via bootstrap.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Modem Bridge",
        description="Ponte entre módulo celular serial e canais de notificação",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    fastapi_app.state.bridge = bridge

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"bridge_injected": bridge is not None})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("app_starting_development_mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
