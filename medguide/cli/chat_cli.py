"""Interactive CLI client for the /chat endpoint.

Mimics the game client: each turn sends the question (or a WAV clip as
base64) together with a history string naming the last topic.
"""

from __future__ import annotations

import argparse
import base64
from pathlib import Path

import requests


def build_history(topic: str | None) -> str | None:
    if not topic:
        return None
    return f"Previously discussed: {topic}"


def build_payload(question: str | None, history: str | None, audio_path: str | None = None) -> dict:
    payload: dict = {}
    if audio_path:
        payload["audio"] = base64.b64encode(Path(audio_path).read_bytes()).decode("utf-8")
    elif question:
        payload["question"] = question
    if history:
        payload["history"] = history
    return payload


def main() -> int:
    parser = argparse.ArgumentParser(description="Interactive medical guide chat CLI")
    parser.add_argument(
        "--url",
        default="http://127.0.0.1:3000/chat",
        help="Chat endpoint URL",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=60,
        help="Request timeout in seconds",
    )
    parser.add_argument(
        "--audio",
        help="Send this WAV file as the first question, then continue with text",
    )
    args = parser.parse_args()

    topic = None
    pending_audio = args.audio
    print("Type your questions. Ctrl+D or 'exit' to quit.")

    while True:
        if pending_audio:
            payload = build_payload(None, build_history(topic), audio_path=pending_audio)
            pending_audio = None
        else:
            try:
                user_input = input("> ").strip()
            except EOFError:
                print()
                break

            if not user_input:
                continue
            if user_input.lower() in {"exit", "quit"}:
                break
            payload = build_payload(user_input, build_history(topic))

        resp = requests.post(args.url, json=payload, timeout=args.timeout)
        data = resp.json() if resp.content else {}
        if resp.status_code != 200:
            print(f"Error {resp.status_code}: {data.get('answer', resp.text)}")
            continue

        topic = data.get("topic") or topic
        print(data.get("answer", ""))
        if topic:
            print(f"[topic: {topic}]")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
