"""Factory for the Gemini-backed chat model."""

from langchain_google_genai import ChatGoogleGenerativeAI

from medguide.config import settings


def get_chat_model():
    """Return a ChatGoogleGenerativeAI instance configured from settings.

    Returns
    -------
    langchain_google_genai.ChatGoogleGenerativeAI
        A chat model bound to the configured Gemini model and API key.
    """
    kwargs = {
        "model": settings.gemini_model,
        "google_api_key": settings.gemini_api_key,
        "max_retries": 0,
    }
    if settings.gemini_temperature is not None:
        kwargs["temperature"] = settings.gemini_temperature
    return ChatGoogleGenerativeAI(**kwargs)
