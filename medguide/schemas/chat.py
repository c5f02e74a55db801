"""Request and response schemas for the /chat endpoint."""

import json

from pydantic import BaseModel, field_validator

DEFAULT_HISTORY = "No previous context."


class ChatRequest(BaseModel):
    """Incoming question from the game client.

    ``audio`` is base64-encoded and takes precedence over ``question``.
    """

    question: str | None = None
    audio: str | None = None
    history: str | None = None

    @field_validator("question", "audio", "history", mode="before")
    @classmethod
    def _coerce_to_text(cls, value):
        # Non-string JSON values are interpolated into the prompt as JSON text.
        if value is None or isinstance(value, str):
            return value
        return json.dumps(value)

    @property
    def history_or_default(self) -> str:
        return self.history or DEFAULT_HISTORY


class ChatResponse(BaseModel):
    """Outgoing answer; ``topic`` is left out of error bodies."""

    answer: str
    topic: str | None = None


class ModelAnswer(BaseModel):
    """The JSON object the model is instructed to return."""

    answer: str
    topic: str
