"""
Production FastAPI Application

Event registry and ticket ledger served over HTTP, with SSE notifications.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ticketing Ledger] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ticketing Ledger] Dependency injection wired')

    # Deploy ledgers and authorize the registry as minter
    setup()
    Logger.base.info('✅ [Ticketing Ledger] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Ticketing Ledger] Shutting down...')

    # In-memory state does not outlive the process
    cleanup()
    container.unwire()

    Logger.base.info('👋 [Ticketing Ledger] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
