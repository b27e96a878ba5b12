"""Fandango showtimes skill: intent handlers and wiring."""

from __future__ import annotations

import logging
from typing import Mapping

from showtimes.core.config import Settings
from showtimes.core.metrics import MetricsCollector
from showtimes.dialog import prompts
from showtimes.dialog.finalizer import Finalizer
from showtimes.dialog.locations import LocationTable, build_location_table
from showtimes.dialog.resolver import DialogResolver
from showtimes.memory.models import DialogSession
from showtimes.skill.base import IntentHandler, Skill, SkillRunner
from showtimes.skill.models import Intent, RequestPayload
from showtimes.skill.response import SkillResponse
from showtimes.tools.fandango import FandangoLookup

logger = logging.getLogger("showtimes.skill")


class FandangoSkill(Skill):
    """Answers "what's playing near <zipcode>" one-shot or over several turns."""

    def __init__(self, resolver: DialogResolver, locations: LocationTable) -> None:
        self.resolver = resolver
        self.locations = locations
        self._handlers: dict[str, IntentHandler] = {
            "OneshotTheaterIntent": self.handle_oneshot,
            "DialogTheaterIntent": self.handle_dialog,
            "SupportedZipcodesIntent": self.handle_supported_zipcodes,
            "AMAZON.HelpIntent": self.handle_help,
            "AMAZON.StopIntent": self.handle_goodbye,
            "AMAZON.CancelIntent": self.handle_goodbye,
        }

    @property
    def intent_handlers(self) -> Mapping[str, IntentHandler]:
        return self._handlers

    def on_session_started(self, request: RequestPayload, session: DialogSession) -> None:
        logger.info("onSessionStarted requestId: %s, sessionId: %s", request.request_id, session.session_id)

    async def on_launch(self, request: RequestPayload, session: DialogSession) -> SkillResponse:
        logger.info("onLaunch requestId: %s, sessionId: %s", request.request_id, session.session_id)
        return SkillResponse.ask(prompts.WELCOME, prompts.HELP)

    def on_session_ended(self, request: RequestPayload, session: DialogSession) -> None:
        logger.info(
            "onSessionEnded requestId: %s, sessionId: %s, reason: %s",
            request.request_id,
            session.session_id,
            request.reason,
        )

    async def handle_oneshot(self, intent: Intent, session: DialogSession) -> SkillResponse:
        return await self.resolver.one_shot(intent.slot_values(), session)

    async def handle_dialog(self, intent: Intent, session: DialogSession) -> SkillResponse:
        return await self.resolver.multi_turn(intent.slot_values(), session)

    async def handle_supported_zipcodes(self, intent: Intent, session: DialogSession) -> SkillResponse:
        return SkillResponse.ask(prompts.supported_locations(self.locations), prompts.WHICH_ZIP)

    async def handle_help(self, intent: Intent, session: DialogSession) -> SkillResponse:
        return SkillResponse.ask(prompts.HELP, prompts.WHICH_ZIP)

    async def handle_goodbye(self, intent: Intent, session: DialogSession) -> SkillResponse:
        return SkillResponse.tell(prompts.GOODBYE)


def create_runner(settings: Settings, metrics: MetricsCollector | None = None) -> SkillRunner:
    """Build the runner and everything behind it from settings."""

    locations = build_location_table(settings.default_location, settings.extra_locations)
    lookup = FandangoLookup(
        settings.fandango_feed_url,
        timeout=settings.fandango_timeout_seconds,
        max_theaters=settings.fandango_max_theaters,
    )
    finalizer = Finalizer(lookup, card_title=settings.skill_title)
    resolver = DialogResolver(locations, finalizer)
    skill = FandangoSkill(resolver, locations)
    return SkillRunner(skill, app_id=settings.alexa_app_id, metrics=metrics)
