"""
AI Client: OpenAI-compatible chat for the tutor
==============================================
The tutor is the only part of DebugMe that talks to a model. It reads a
snapshot of the learner's state and returns free text; it never writes
progression or profile state.

Point OPENAI_BASE_URL at any OpenAI-compatible server to run locally.
"""

from openai import OpenAI
from .config import settings
from .errors import TutorUnavailable

TUTOR_MODEL = settings.TUTOR_MODEL

_client: OpenAI | None = None


def _get_client() -> OpenAI:
    global _client
    if not settings.OPENAI_API_KEY:
        raise TutorUnavailable(
            "OpenAI API key is not configured. Please set OPENAI_API_KEY in your .env file."
        )
    if _client is None:
        _client = OpenAI(
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_BASE_URL,
        )
    return _client


def chat(
    messages: list[dict],
    model: str = TUTOR_MODEL,
    system: str = "",
    max_tokens: int = settings.TUTOR_MAX_TOKENS,
    temperature: float = settings.TUTOR_TEMPERATURE,
) -> str:
    full_messages = []
    if system:
        full_messages.append({"role": "system", "content": system})
    full_messages.extend(messages)

    client = _get_client()
    print(f"[ai] → {model} ({len(full_messages)} messages)")

    response = client.chat.completions.create(
        model=model,
        messages=full_messages,
        max_tokens=max_tokens,
        temperature=temperature,
    )
    return response.choices[0].message.content or ""
