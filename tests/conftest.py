from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def oneshot_event(fixtures_dir: Path) -> dict:
    return json.loads((fixtures_dir / "oneshot_seattle_saturday.json").read_text(encoding="utf-8"))


@pytest.fixture
def launch_event(fixtures_dir: Path) -> dict:
    return json.loads((fixtures_dir / "launch_request.json").read_text(encoding="utf-8"))


@pytest.fixture
def feed_document(fixtures_dir: Path) -> bytes:
    return (fixtures_dir / "moviesnearme_98101.rss").read_bytes()


@pytest.fixture
def empty_feed_document(fixtures_dir: Path) -> bytes:
    return (fixtures_dir / "moviesnearme_empty.rss").read_bytes()


@pytest.fixture
def intent_event() -> Callable[..., dict[str, Any]]:
    """Build an IntentRequest envelope with the given slot values."""

    def build(
        name: str,
        slots: dict[str, str | None] | None = None,
        *,
        attributes: dict[str, Any] | None = None,
        new: bool = False,
        session_id: str = "session-1",
        application_id: str = "amzn1.echo-sdk-ams.app.showtimes",
    ) -> dict[str, Any]:
        intent: dict[str, Any] = {"name": name, "slots": {}}
        for slot_name, value in (slots or {}).items():
            slot: dict[str, Any] = {"name": slot_name}
            if value is not None:
                slot["value"] = value
            intent["slots"][slot_name] = slot

        return {
            "version": "1.0",
            "session": {
                "new": new,
                "sessionId": session_id,
                "application": {"applicationId": application_id},
                "attributes": attributes or {},
                "user": {"userId": "user-1"},
            },
            "request": {
                "type": "IntentRequest",
                "requestId": f"request-{name}",
                "intent": intent,
            },
        }

    return build
