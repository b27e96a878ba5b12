"""FastAPI application entry point for the Fandango showtimes skill."""

import logging
from typing import Any

from fastapi import Depends, FastAPI

from showtimes.core.config import get_settings
from showtimes.core.errors import SkillRequestError, skill_request_error_handler, unhandled_exception_handler
from showtimes.core.logging import configure_logging, request_id_middleware
from showtimes.core.metrics import MetricsCollector
from showtimes.skill.base import SkillRunner
from showtimes.skill.fandango import create_runner

settings = get_settings()
logger = logging.getLogger("showtimes.app")

metrics = MetricsCollector()
runner = create_runner(settings, metrics=metrics)

app = FastAPI(title=settings.app_name, version="0.1.0", docs_url="/docs")

app.middleware("http")(request_id_middleware)


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Return basic service status for monitoring."""

    return {"status": "ok"}


def get_runner() -> SkillRunner:
    """Dependency injector for the skill runner."""

    return runner


@app.post("/alexa", tags=["skill"])
async def alexa(event: dict, skill_runner: SkillRunner = Depends(get_runner)) -> dict[str, Any]:
    """Handle one request envelope from the voice host."""

    return await skill_runner.execute(event)


@app.on_event("startup")
async def configure_app_logging() -> None:
    level = configure_logging(settings.log_level)
    logger.info("Logging configured at %s level for %s environment", logging.getLevelName(level), settings.environment)


app.add_exception_handler(SkillRequestError, skill_request_error_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.get("/metrics", tags=["metrics"])
async def metrics_endpoint() -> dict:
    snapshot = metrics.snapshot()
    return {
        "total_requests": snapshot.total_requests,
        "request_types": snapshot.request_types,
        "intents": snapshot.intents,
    }
