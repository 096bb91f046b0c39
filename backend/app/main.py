import logging
from collections.abc import Callable
from typing import Any

import uvicorn
from fastapi import FastAPI

from .config import settings
from .responses import register_exception_handlers
from .till_salary import router as till_salary_router

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)
register_exception_handlers(app)
app.include_router(till_salary_router)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def serve(run: Callable[..., Any] = uvicorn.run) -> None:
    """Start the API on the configured host/port. `run` is swappable for tests."""
    configure_logging()
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    try:
        run(app, host=settings.host, port=settings.port)
    except Exception:
        logger.exception("Server stopped with an error")
        raise


if __name__ == "__main__":
    serve()
