"""Medical agent node: answers one question from the knowledge document."""

import logging

from medguide.agents.prompt_builder import build_prompt_parts
from medguide.knowledge.loader import KnowledgeBase
from medguide.llm.gemini_client import get_chat_model
from medguide.schemas.chat import ChatRequest, ModelAnswer
from medguide.utils.llm_helpers import invoke_llm
from medguide.utils.llm_parse import parse_model_answer

logger = logging.getLogger("uvicorn.error")


def answer_question(knowledge: KnowledgeBase, request: ChatRequest) -> ModelAnswer:
    """Build the prompt, call the model once and parse its JSON reply.

    Transport, service and parse errors propagate to the caller.
    """
    parts = build_prompt_parts(knowledge, request)
    llm = get_chat_model()
    logger.info("Gemini call started")
    content = invoke_llm(parts, llm=llm)
    logger.info("Gemini call finished")
    parsed = parse_model_answer(content)
    logger.info("Answer: %s", parsed.answer)
    return parsed
