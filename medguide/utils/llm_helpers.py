"""Shared LLM invocation helper."""

from langchain_core.messages import HumanMessage

from medguide.llm.gemini_client import get_chat_model


def response_text(response) -> str:
    """Extract the text of a chat model response.

    Providers may return content as a list of blocks; text blocks are joined.
    """
    content = getattr(response, "content", response)
    if isinstance(content, list):
        chunks = []
        for block in content:
            if isinstance(block, str):
                chunks.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                chunks.append(block.get("text", ""))
        content = "".join(chunks)
    return str(content).strip()


def invoke_llm(parts: list, llm=None) -> str:
    """Send *parts* as one user message and return the stripped text reply."""
    if llm is None:
        llm = get_chat_model()
    response = llm.invoke([HumanMessage(content=parts)])
    return response_text(response)
