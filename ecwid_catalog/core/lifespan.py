# ecwid_catalog/core/lifespan.py
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import logging

from ecwid_catalog.client import EcwidClient
from ecwid_catalog.core.config import Settings, get_settings
from ecwid_catalog.core.logging import configure_logging as setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def ecwid_session(
    settings: Optional[Settings] = None,
    *,
    configure_logging: bool = False,
    **client_kwargs,
) -> AsyncIterator[EcwidClient]:
    """
    Settings-driven client for scripts and services: open the HTTP session,
    close it on the way out. With `configure_logging=True` the root logger is
    also set up (DEBUG when settings.DEBUG); leave it off inside an application
    that owns its logging.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

    # --- Startup ---
    client = EcwidClient.from_settings(settings, **client_kwargs)
    logger.info("Ecwid session open app=%s env=%s store_id=%s", settings.APP_NAME, settings.APP_ENV, client.store_id)

    try:
        yield client
    finally:
        # --- Shutdown ---
        await client.aclose()
        logger.info("Ecwid session closed store_id=%s", client.store_id)
