"""Assemble the ordered model-input parts for one chat request."""

from __future__ import annotations

import logging
from typing import Any

from medguide.config import settings
from medguide.knowledge.loader import KnowledgeBase
from medguide.prompts.medical import (
    AUDIO_QUESTION_PROMPT,
    MEDICAL_SYSTEM_PROMPT,
    USER_QUESTION_PROMPT,
)
from medguide.schemas.chat import ChatRequest

logger = logging.getLogger("uvicorn.error")

PromptPart = str | dict[str, Any]


def audio_part(data: str, mime_type: str | None = None) -> dict[str, Any]:
    """Inline media block carrying base64 *data*."""
    return {
        "type": "media",
        "mime_type": mime_type or settings.audio_mime_type,
        "data": data,
    }


def build_prompt_parts(knowledge: KnowledgeBase, request: ChatRequest) -> list[PromptPart]:
    """Return the instruction block followed by the user's audio or question.

    Parameters
    ----------
    knowledge : KnowledgeBase
        Loaded knowledge document interpolated into the instructions.
    request : ChatRequest
        Incoming request; audio wins over question when both are set.

    Returns
    -------
    list[str | dict]
        Parts in the order they are sent to the model.
    """
    parts: list[PromptPart] = [
        MEDICAL_SYSTEM_PROMPT.format(
            knowledge_text=knowledge.text,
            history=request.history_or_default,
        )
    ]
    if request.audio:
        parts.append(audio_part(request.audio))
        parts.append(AUDIO_QUESTION_PROMPT)
    else:
        if request.question is None:
            logger.warning("Chat request has neither question nor audio")
        parts.append(USER_QUESTION_PROMPT.format(question=request.question or ""))
    return parts
