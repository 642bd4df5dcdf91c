from typing import Any, Dict, List, Optional

from anyio import to_thread
from openai import OpenAI

from getfit.core.config import settings

_client: Optional[OpenAI] = None


class OpenAINotConfigured(RuntimeError):
    """OPENAI_API_KEY не задан."""

    def __init__(self):
        super().__init__("OpenAI API key not configured")


def is_configured() -> bool:
    return bool(settings.openai_api_key)


def _get_client() -> OpenAI:
    # клиент создаётся лениво: без ключа приложение должно стартовать (mock-режим)
    global _client
    if _client is None:
        if not settings.openai_api_key:
            raise OpenAINotConfigured()
        _client = OpenAI(api_key=settings.openai_api_key)
    return _client


async def chat_completion(
    messages: List[Dict[str, Any]],
    model: Optional[str] = None,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
    json_mode: bool = True,
) -> str:
    """
    Обёртка над chat-completion.
    На вход:
      - messages: список сообщений формата {"role": "...", "content": ...},
        content может быть строкой или списком частей (text / image_url)
    На выход:
      - content первого ответа модели (строка, может быть пустой).
    """
    client = _get_client()

    kwargs: Dict[str, Any] = {
        "model": model or settings.openai_model,
        "messages": messages,
    }
    if temperature is not None:
        kwargs["temperature"] = temperature
    if max_tokens is not None:
        kwargs["max_tokens"] = max_tokens
    if json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    def _call():
        return client.chat.completions.create(**kwargs)

    # openai v1 клиент синхронный, поэтому вызываем его в отдельном потоке
    response = await to_thread.run_sync(_call)
    if not response.choices:
        return ""
    return response.choices[0].message.content or ""
