"""Reconocedor LLM (proveedor compatible OpenAI via SDK).

Responsabilidad:
- Pedir al modelo una clasificación del mensaje en JSON estricto.
- Parsear la salida con Pydantic y normalizarla como `RecognitionResult`.

Sin reintentos: si el proveedor falla o responde basura, se lanza
`RecognitionError` y el llamador decide.
"""

from __future__ import annotations

import json
import re
from typing import Any

from openai import APIError, AsyncOpenAI
from pydantic import BaseModel, Field, ValidationError

from core.config import AppSettings
from core.domain.models import Entity, RecognitionResult
from core.errors import RecognitionError
from core.interfaces.recognizer import Recognizer

_JSON_FENCE_RE = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL | re.IGNORECASE)

_SYSTEM_PROMPT = """You are the language-understanding component of a weather chat bot.
Classify the user's message and extract city names.

Intents:
- "GetWeather": the user asks about current weather conditions somewhere.
- "None": anything else.

Return ONLY a JSON object, no prose, no fences:
{"intents": {"GetWeather": <0..1>, "None": <0..1>},
 "entities": [{"entity": "<city as written>", "type": "City", "score": <0..1>}]}

List cities in the order they appear in the message. Use an empty list when
there are none."""


class _RecognizerPayload(BaseModel):
    intents: dict[str, float] = Field(default_factory=dict)
    entities: list[Entity] = Field(default_factory=list)


def is_local_base_url(url: str) -> bool:
    url_l = (url or "").strip().lower()
    return url_l.startswith("http://localhost") or url_l.startswith("http://127.0.0.1") or url_l.startswith(
        "http://0.0.0.0"
    )


def _extract_json_object(text: str) -> str:
    """Obtiene el primer objeto JSON presente en la respuesta del proveedor."""
    match = _JSON_FENCE_RE.search(text)
    if match:
        return match.group(1).strip()

    stripped = text.strip()
    if stripped.startswith("{") and stripped.endswith("}"):
        return stripped

    start = stripped.find("{")
    end = stripped.rfind("}")
    if 0 <= start < end:
        return stripped[start : end + 1]

    raise ValueError("Could not locate a JSON object in the AI provider response.")


class LLMRecognizer(Recognizer):
    def __init__(self, settings: AppSettings | None = None, *, client: AsyncOpenAI | None = None) -> None:
        self._settings = settings or AppSettings()
        if client is None:
            api_key = (self._settings.ai_api_key or "").strip() or "local"
            client = AsyncOpenAI(
                api_key=api_key,
                base_url=self._settings.ai_base_url,
                timeout=self._settings.ai_timeout_seconds,
                max_retries=0,
            )
        self._client = client

    async def recognize(self, text: str) -> RecognitionResult:
        try:
            response = await self._client.chat.completions.create(
                model=self._settings.ai_model,
                messages=[
                    {"role": "system", "content": _SYSTEM_PROMPT},
                    {"role": "user", "content": text},
                ],
                temperature=0.0,
            )
        except APIError as exc:
            raise RecognitionError(f"AI provider request failed: {type(exc).__name__}") from exc

        if not response.choices:
            raise RecognitionError("AI provider returned no choices.")
        content = (response.choices[0].message.content or "").strip()
        try:
            data: Any = json.loads(_extract_json_object(content))
            parsed = _RecognizerPayload.model_validate(data)
        except (ValueError, ValidationError) as exc:
            raise RecognitionError("AI provider returned an unparseable classification.") from exc

        return RecognitionResult(text=text, intents=parsed.intents, entities=parsed.entities)
