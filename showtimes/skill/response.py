"""Outbound actions the skill can take at the end of a turn."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class SpeechType(str, Enum):
    PLAIN_TEXT = "PlainText"
    SSML = "SSML"


@dataclass(frozen=True, slots=True)
class OutputSpeech:
    text: str
    type: SpeechType = SpeechType.PLAIN_TEXT

    @classmethod
    def of(cls, text: str) -> "OutputSpeech":
        """Build speech, treating ``<speak>``-wrapped text as SSML."""

        stripped = text.strip()
        if stripped.startswith("<speak>") and stripped.endswith("</speak>"):
            return cls(text=stripped, type=SpeechType.SSML)
        return cls(text=text)

    def to_dict(self) -> dict[str, str]:
        if self.type is SpeechType.SSML:
            return {"type": self.type.value, "ssml": self.text}
        return {"type": self.type.value, "text": self.text}


@dataclass(frozen=True, slots=True)
class Card:
    title: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"type": "Simple", "title": self.title, "content": self.content}


@dataclass(frozen=True, slots=True)
class SkillResponse:
    """The single action produced for a turn."""

    speech: OutputSpeech
    should_end_session: bool
    reprompt: OutputSpeech | None = None
    card: Card | None = None

    @classmethod
    def ask(cls, speech: str, reprompt: str) -> "SkillResponse":
        """Speak and keep the session open for the user's answer."""

        return cls(speech=OutputSpeech.of(speech), reprompt=OutputSpeech.of(reprompt), should_end_session=False)

    @classmethod
    def tell(cls, speech: str) -> "SkillResponse":
        """Speak and end the session."""

        return cls(speech=OutputSpeech.of(speech), should_end_session=True)

    @classmethod
    def tell_with_card(cls, speech: str, title: str, content: str) -> "SkillResponse":
        return cls(
            speech=OutputSpeech.of(speech),
            card=Card(title=title, content=content),
            should_end_session=True,
        )

    def to_envelope(self, session_attributes: Mapping[str, Any] | None = None) -> dict[str, Any]:
        body: dict[str, Any] = {"outputSpeech": self.speech.to_dict()}
        if self.reprompt is not None:
            body["reprompt"] = {"outputSpeech": self.reprompt.to_dict()}
        if self.card is not None:
            body["card"] = self.card.to_dict()
        body["shouldEndSession"] = self.should_end_session

        envelope: dict[str, Any] = {"version": "1.0", "response": body}
        if session_attributes:
            envelope["sessionAttributes"] = dict(session_attributes)
        return envelope
