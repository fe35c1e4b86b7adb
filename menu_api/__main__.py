from __future__ import annotations

import structlog
import uvicorn

from menu_api.core.config import settings
from menu_api.main import app

logger = structlog.get_logger(__name__)


def run() -> None:
    logger.info("server_starting", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
