"""Pydantic models for the request envelope posted by the voice host."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class HostModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Slot(HostModel):
    name: str
    value: Optional[str] = None


class Intent(HostModel):
    name: str
    slots: Dict[str, Slot] = Field(default_factory=dict)

    def slot_values(self) -> dict[str, str | None]:
        """Flatten slots to raw values; missing and empty look the same downstream."""

        return {key: slot.value for key, slot in self.slots.items()}


class Application(HostModel):
    application_id: str = Field(alias="applicationId")


class User(HostModel):
    user_id: Optional[str] = Field(default=None, alias="userId")


class SessionPayload(HostModel):
    new: bool = False
    session_id: str = Field(alias="sessionId")
    application: Optional[Application] = None
    attributes: Optional[Dict[str, Any]] = None
    user: Optional[User] = None


class RequestPayload(HostModel):
    type: str
    request_id: str = Field(alias="requestId")
    timestamp: Optional[str] = None
    locale: Optional[str] = None
    intent: Optional[Intent] = None
    reason: Optional[str] = None


class RequestEnvelope(HostModel):
    version: str = "1.0"
    session: SessionPayload
    request: RequestPayload
    context: Optional[Dict[str, Any]] = None
