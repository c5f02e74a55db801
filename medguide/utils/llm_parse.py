"""Normalize a free-text model completion into a validated answer."""

from __future__ import annotations

import json
import re

from pydantic import ValidationError

from medguide.schemas.chat import ModelAnswer

CODE_FENCE_RE = re.compile(r"```json|```")


class AnswerParseError(ValueError):
    """Raised when a completion is not the expected two-field JSON object."""

    def __init__(self, message: str, cleaned: str):
        super().__init__(message)
        self.cleaned = cleaned


def strip_code_fences(raw: str) -> str:
    return CODE_FENCE_RE.sub("", raw or "").strip()


def parse_model_answer(raw: str) -> ModelAnswer:
    """Strip markdown fences from *raw* and validate it as ``ModelAnswer``.

    No partial recovery is attempted: any decode or schema failure raises
    ``AnswerParseError``.
    """
    cleaned = strip_code_fences(raw)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise AnswerParseError(f"Model output is not JSON: {exc}", cleaned) from exc
    try:
        return ModelAnswer.model_validate(data)
    except ValidationError as exc:
        raise AnswerParseError(f"Model output has the wrong shape: {exc}", cleaned) from exc
