"""Tests for prompt part assembly."""

from medguide.agents.prompt_builder import build_prompt_parts
from medguide.knowledge.loader import KnowledgeBase
from medguide.schemas.chat import ChatRequest

KNOWLEDGE = KnowledgeBase(text="Diabetes causes high blood sugar.", source="test")


def _media_parts(parts):
    return [part for part in parts if isinstance(part, dict)]


def test_text_question_appends_current_user_question():
    parts = build_prompt_parts(KNOWLEDGE, ChatRequest(question="What is diabetes?"))

    assert len(parts) == 2
    assert _media_parts(parts) == []
    assert parts[1] == "CURRENT USER QUESTION: What is diabetes?"


def test_audio_adds_single_media_part_and_no_question():
    parts = build_prompt_parts(
        KNOWLEDGE,
        ChatRequest(question="typed text", audio="UklGRiQAAABXQVZF"),
    )

    assert _media_parts(parts) == [
        {"type": "media", "mime_type": "audio/wav", "data": "UklGRiQAAABXQVZF"}
    ]
    assert parts[2] == "Answer this medical question from the audio."
    assert not any(isinstance(p, str) and "CURRENT USER QUESTION" in p for p in parts)


def test_instruction_block_carries_knowledge_and_history():
    parts = build_prompt_parts(
        KNOWLEDGE,
        ChatRequest(question="in short", history="Previously discussed: Diabetes"),
    )

    instructions = parts[0]
    assert "CONTEXT DATA: Diabetes causes high blood sugar." in instructions
    assert "PREVIOUS CONVERSATION (Memory): Previously discussed: Diabetes" in instructions
    assert "keep the answer under 30 words" in instructions
    assert "I'm sorry, that information is not in my medical guide." in instructions
    assert '{ "answer": "Your answer here...", "topic": "The Topic Discussed" }' in instructions


def test_missing_history_uses_sentinel():
    parts = build_prompt_parts(KNOWLEDGE, ChatRequest(question="why", history=""))

    assert "PREVIOUS CONVERSATION (Memory): No previous context." in parts[0]


def test_knowledge_with_braces_is_inserted_verbatim():
    knowledge = KnowledgeBase(text="Dose: {weight} mg per {kg}", source="test")

    parts = build_prompt_parts(knowledge, ChatRequest(question="dose?"))

    assert "CONTEXT DATA: Dose: {weight} mg per {kg}" in parts[0]


def test_missing_question_and_audio_still_builds_prompt():
    parts = build_prompt_parts(KNOWLEDGE, ChatRequest())

    assert parts[-1] == "CURRENT USER QUESTION: "
