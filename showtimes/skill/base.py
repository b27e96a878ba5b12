"""Skill interface and the runner that drives it for one host request."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Mapping

from pydantic import ValidationError

from showtimes.core.errors import InvalidApplicationIdError, MalformedRequestError, UnsupportedRequestError
from showtimes.core.metrics import MetricsCollector
from showtimes.memory.models import DialogSession
from showtimes.skill.models import Intent, RequestEnvelope, RequestPayload
from showtimes.skill.response import SkillResponse

logger = logging.getLogger("showtimes.skill")

IntentHandler = Callable[[Intent, DialogSession], Awaitable[SkillResponse]]


class Skill(ABC):
    """Capabilities the runner needs from a skill."""

    @abstractmethod
    def on_session_started(self, request: RequestPayload, session: DialogSession) -> None:
        """Called once, before the first request of a new session is handled."""

    @abstractmethod
    async def on_launch(self, request: RequestPayload, session: DialogSession) -> SkillResponse:
        """Respond to the user opening the skill without an intent."""

    @abstractmethod
    def on_session_ended(self, request: RequestPayload, session: DialogSession) -> None:
        """Called when the host closes the session. No speech is returned."""

    @property
    @abstractmethod
    def intent_handlers(self) -> Mapping[str, IntentHandler]:
        """Intent name to handler mapping."""


class SkillRunner:
    """Validate a host request and route it to the skill."""

    def __init__(
        self,
        skill: Skill,
        *,
        app_id: str | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.skill = skill
        self.app_id = app_id
        self.metrics = metrics

    async def execute(self, event: Mapping[str, Any]) -> dict[str, Any]:
        try:
            envelope = RequestEnvelope.model_validate(event)
        except ValidationError as exc:
            raise MalformedRequestError(f"Malformed request envelope: {exc.error_count()} error(s)") from exc

        self._verify_application(envelope)

        payload = envelope.session
        session = DialogSession(
            session_id=payload.session_id,
            attributes=dict(payload.attributes or {}),
            new=payload.new,
            application_id=payload.application.application_id if payload.application else None,
            user_id=payload.user.user_id if payload.user else None,
        )
        request = envelope.request

        if session.new:
            self.skill.on_session_started(request, session)

        intent_name = request.intent.name if request.intent else None
        if self.metrics is not None:
            self.metrics.record_request(request.type, intent_name)

        if request.type == "LaunchRequest":
            response = await self.skill.on_launch(request, session)
        elif request.type == "IntentRequest":
            response = await self._dispatch_intent(request, session)
        elif request.type == "SessionEndedRequest":
            self.skill.on_session_ended(request, session)
            return {"version": "1.0", "response": {}}
        else:
            raise UnsupportedRequestError(f"Unsupported request type: {request.type}")

        return response.to_envelope(session.attributes)

    def _verify_application(self, envelope: RequestEnvelope) -> None:
        if not self.app_id:
            return
        application = envelope.session.application
        if application is None or application.application_id != self.app_id:
            raise InvalidApplicationIdError("Invalid applicationId")

    async def _dispatch_intent(self, request: RequestPayload, session: DialogSession) -> SkillResponse:
        intent = request.intent
        if intent is None:
            raise MalformedRequestError("IntentRequest without an intent")

        handler = self.skill.intent_handlers.get(intent.name)
        if handler is None:
            raise UnsupportedRequestError(f"Unsupported intent: {intent.name}")

        logger.info(
            "Dispatching %s requestId: %s, sessionId: %s",
            intent.name,
            request.request_id,
            session.session_id,
        )
        return await handler(intent, session)
