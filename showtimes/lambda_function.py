"""AWS Lambda entry point: hands the host event to the skill runner."""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any

from showtimes.core.config import get_settings
from showtimes.core.logging import configure_logging
from showtimes.skill.base import SkillRunner
from showtimes.skill.fandango import create_runner

logger = logging.getLogger("showtimes.lambda")


@lru_cache(maxsize=1)
def get_runner() -> SkillRunner:
    return create_runner(get_settings())


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Lambda handler; errors propagate so the invocation is reported as failed."""

    configure_logging(get_settings().log_level)
    logger.debug("Invocation %s", getattr(context, "aws_request_id", None))
    return asyncio.run(get_runner().execute(event))
