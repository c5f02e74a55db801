"""Load the static medical knowledge document into memory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("uvicorn.error")


@dataclass(frozen=True)
class KnowledgeBase:
    """Immutable knowledge text shared read-only by every request."""

    text: str = ""
    source: str = ""

    @property
    def is_loaded(self) -> bool:
        return bool(self.text)


def load_knowledge(path: str | Path) -> KnowledgeBase:
    """Read *path* fully as UTF-8 text.

    A missing or unreadable file is logged and yields an empty
    ``KnowledgeBase``; the caller keeps running and ``/chat`` degrades to an
    error response.
    """
    source = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading %s. Did you create it? %s", source, exc)
        return KnowledgeBase(text="", source=source)
    logger.info("Medical data loaded: %d chars", len(text))
    return KnowledgeBase(text=text, source=source)
