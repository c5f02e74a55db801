"""Tests for the chat CLI payload helpers."""

import base64

from medguide.cli.chat_cli import build_history, build_payload


def test_build_history_names_last_topic():
    assert build_history("Diabetes") == "Previously discussed: Diabetes"
    assert build_history(None) is None


def test_build_payload_text_question_with_history():
    payload = build_payload("in short", "Previously discussed: Diabetes")

    assert payload == {"question": "in short", "history": "Previously discussed: Diabetes"}


def test_build_payload_encodes_audio_file(tmp_path):
    clip = tmp_path / "question.wav"
    clip.write_bytes(b"RIFF\x00\x00WAVE")

    payload = build_payload(None, None, audio_path=str(clip))

    assert payload == {"audio": base64.b64encode(b"RIFF\x00\x00WAVE").decode("utf-8")}
